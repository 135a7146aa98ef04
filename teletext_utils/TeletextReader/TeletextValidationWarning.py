class TeletextValidationWarning(UserWarning):
    """Warning raised when page data does not match its declared layout."""
