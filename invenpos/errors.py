class InvenPOSError(Exception):
    pass


class InvalidDiscountError(InvenPOSError, ValueError):
    pass


class EmptyOrderError(InvenPOSError):
    pass


class ConfigError(InvenPOSError):
    pass
