class TeletextFetchWarning(UserWarning):
    """Warning raised when a teletext page could not be fetched."""
