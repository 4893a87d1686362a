"""
Exceptions raised for caller errors.

Malformed OCR text never raises: every parsing stage degrades to "no match".
These exceptions cover invalid record edits and malformed rule files.
"""


class InvalidTransactionError(ValueError):
    """
    Raised when a transaction would violate a record invariant.

    Carries the offending field and value so the API can report them.
    """

    def __init__(self, message: str, field: str = None, value=None):
        self.field = field
        self.value = value

        details = []
        if field:
            details.append(f"Field: {field}")
        if value is not None:
            details.append(f"Value: {value!r}")

        full_message = f"{message}\n" + "\n".join(details) if details else message
        super().__init__(full_message)


class RuleSetError(ValueError):
    """
    Raised when a rule file cannot be turned into a RuleSet.
    """

    def __init__(self, message: str, filename: str = None):
        self.filename = filename
        full_message = f"{message}\nFile: {filename}" if filename else message
        super().__init__(full_message)
