class ValidationError(Exception):
    """Raised when an edit cannot be applied to an interface definition"""

    def __init__(
        self,
        error_msg: str,
        status_code: int = 400,
    ):
        super().__init__(error_msg)
        self.error_msg = error_msg
        self.status_code = status_code

    def __str__(self):
        return self.error_msg
