"""
Built-in vocabularies for Polish, Russian and English banking-app screenshots.

All tables are read-only constants. ``DEFAULT_RULES`` is the RuleSet used
when no rule files are configured.
"""
from types import MappingProxyType

from ledger_ocr.common.models import ENTERTAINMENT, FOOD, HEALTH, HOME, TRANSPORT
from .ruleset import BrandGroup, CategoryRule, RuleSet

# ---------------------------------------------------------------------------
# Calendar vocabularies (lower-case)
# ---------------------------------------------------------------------------

RU_WEEKDAYS = ('понедельник', 'вторник', 'среда', 'четверг', 'пятница', 'суббота', 'воскресенье')
EN_WEEKDAYS = ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')
# OCR often drops Polish diacritics, so the stripped spellings are accepted too.
PL_WEEKDAYS = (
    'poniedziałek', 'poniedzialek', 'wtorek', 'środa', 'sroda', 'czwartek',
    'piątek', 'piatek', 'sobota', 'niedziela',
)

RU_MONTHS = {
    'января': '01', 'февраля': '02', 'марта': '03', 'апреля': '04',
    'мая': '05', 'июня': '06', 'июля': '07', 'августа': '08',
    'сентября': '09', 'октября': '10', 'ноября': '11', 'декабря': '12',
}
EN_MONTHS = {
    'january': '01', 'february': '02', 'march': '03', 'april': '04',
    'may': '05', 'june': '06', 'july': '07', 'august': '08',
    'september': '09', 'october': '10', 'november': '11', 'december': '12',
}
PL_MONTHS = {
    'stycznia': '01', 'lutego': '02', 'marca': '03', 'kwietnia': '04',
    'maja': '05', 'czerwca': '06', 'lipca': '07', 'sierpnia': '08',
    'września': '09', 'wrzesnia': '09', 'października': '10', 'pazdziernika': '10',
    'listopada': '11', 'grudnia': '12',
}

# Month tokens never collide across languages, so one table serves all three.
MONTHS = MappingProxyType({**RU_MONTHS, **EN_MONTHS, **PL_MONTHS})

TODAY_WORDS = ('сегодня', 'today', 'dzisiaj', 'dziś', 'dzis')
YESTERDAY_WORDS = ('вчера', 'yesterday', 'wczoraj')

# ---------------------------------------------------------------------------
# Currency markers
# ---------------------------------------------------------------------------

LOCAL_CURRENCY = (r'PLN', r'zł')
OTHER_CURRENCY = (r'₽', r'руб\.?', r'RUB', r'EUR', r'€', r'USD', r'\$')

# ---------------------------------------------------------------------------
# Merchant brands, most specific group first
# ---------------------------------------------------------------------------

BRAND_GROUPS = (
    BrandGroup('featured', (r"Duży Ben", r"Duzy Ben", r"ROSSMANN", r"Żabka", r"Zabka")),
    BrandGroup('grocery', (
        r"Biedronka", r"Carrefour", r"Tesco", r"Lidl", r"Auchan", r"Kaufland",
        r"Netto", r"Dino", r"Polomarket", r"Stokrotka",
        r"Пят[её]рочка", r"Магнит", r"Перекр[её]сток", r"ВкусВилл", r"Ашан",
    )),
    BrandGroup('food', (
        r"McDonald'?s", r"KFC", r"Burger King", r"Pizza Hut", r"Subway",
        r"Starbucks", r"Costa Coffee", r"Green Caff[eè] Nero", r"Вкусно и точка",
    )),
    BrandGroup('transport', (
        r"ZTM", r"MPK", r"Jakdojade", r"Uber", r"Bolt", r"mytaxi", r"Taxi",
        r"Яндекс Такси", r"Такси",
    )),
    BrandGroup('pharmacy', (r"Apteka", r"DOZ", r"Gemini", r"Melissa", r"Ziko", r"Аптека")),
    BrandGroup('bank', (
        r"PKO", r"Pekao", r"mBank", r"ING", r"Santander", r"Millennium",
        r"Alior", r"Getin", r"BNP Paribas", r"Сбербанк", r"Тинькофф",
    )),
    BrandGroup('fuel', (r"BP", r"Shell", r"Orlen", r"Lotos", r"Circle K", r"Esso")),
    BrandGroup('apparel', (r"H&M", r"Zara", r"Reserved", r"Cropp", r"House", r"Mohito")),
)

# ---------------------------------------------------------------------------
# Category rules, checked in this order. Rules match whole words; a leading
# ``\w*`` lets a stem sit inside Polish compounds (Supermarket, Hamburgerownia).
# ---------------------------------------------------------------------------

CATEGORY_RULES = (
    CategoryRule(FOOD, (
        # grocery chains
        r"Biedronka", r"Żabka", r"Zabka", r"Carrefour", r"Tesco", r"Lidl", r"Auchan",
        r"Kaufland", r"Netto", r"Dino", r"Polomarket", r"Stokrotka",
        r"Пят[её]рочка", r"Магнит", r"Перекр[её]сток", r"ВкусВилл", r"Ашан",
        # restaurants and cafés
        r"McDonald\w*", r"KFC", r"\w*burger\w*", r"\w*pizz\w*", r"Restaurant\w*",
        r"Restauracj\w*", r"Kawiarni\w*", r"Caf[eéè]\w*", r"Coffee", r"Starbucks",
        r"Subway", r"ресторан\w*", r"кафе", r"коф\w*",
        # generic food words
        r"sklep\w*", r"\w*market\w*", r"grocer\w*", r"\w*food\w*", r"jedzeni\w*",
        r"żywnoś\w*", r"zywnos\w*", r"продукт\w*", r"еда",
    )),
    CategoryRule(HEALTH, (
        r"ROSSMANN", r"Apteka", r"DOZ", r"Gemini", r"Melissa", r"Ziko", r"Pharmacy",
        r"аптек\w*",
        r"lekarz\w*", r"dentyst\w*", r"doctor", r"clinic\w*", r"przychodni\w*",
        r"szpital\w*", r"hospital", r"клиник\w*", r"врач\w*",
        r"zdrowi\w*", r"health", r"medical", r"medyczn\w*",
    )),
    CategoryRule(TRANSPORT, (
        r"ZTM", r"MPK", r"Jakdojade", r"Uber", r"Bolt", r"Taxi", r"mytaxi", r"такси",
        r"Bus", r"Autobus", r"Tramwaj", r"Metro", r"метро",
        r"BP", r"Shell", r"Orlen", r"Lotos", r"Circle K", r"Esso", r"Benzyn\w*",
        r"Diesel", r"Paliw\w*", r"бензин\w*",
        r"transport\w*", r"przewóz", r"przejazd\w*", r"bilet\w*", r"билет\w*",
    )),
    CategoryRule(ENTERTAINMENT, (
        r"Duży Ben", r"Duzy Ben", r"Cinema\w*", r"Kino\w*", r"кино\w*", r"Theat(?:er|re)",
        r"Teatr", r"театр\w*", r"Club", r"Klub", r"Bar", r"Pub",
        r"Sport\w*", r"Gym", r"Fitness", r"Siłowni\w*", r"Silowni\w*", r"Basen", r"Pool",
        r"rozrywk\w*", r"entertainment", r"zabaw\w*", r"impreza",
    )),
    CategoryRule(HOME, (
        r"IKEA", r"Castorama", r"Leroy Merlin", r"OBI", r"Bricomarch[ée]",
        r"dom", r"house", r"mieszkani\w*", r"apartment", r"czynsz", r"rent",
        r"жкх", r"квартплат\w*",
        r"prąd", r"electricity", r"gaz", r"gas", r"woda", r"water", r"internet",
        r"telefon", r"phone",
    )),
)

# ---------------------------------------------------------------------------
# Words that are never a merchant name
# ---------------------------------------------------------------------------

NOISE_WORDS = (
    *RU_WEEKDAYS, *EN_WEEKDAYS, *PL_WEEKDAYS,
    *TODAY_WORDS, *YESTERDAY_WORDS,
    r"операци\w*", r"transactions?", r"включая", r"скрытые",
    r"operacj\w*", r"historia",
)

DEFAULT_RULES = RuleSet(
    brand_groups=BRAND_GROUPS,
    category_rules=CATEGORY_RULES,
    noise_words=NOISE_WORDS,
)
