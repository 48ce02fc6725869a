"""Definition of odlink-specific exceptions

Description:
------------

Custom exceptions used by odlink for more specific error messages and handling.

"""


class OdlinkException(Exception):
    pass


class DuplicateParameterError(OdlinkException):
    pass


class InconsistentObservableTypeError(OdlinkException):
    pass


class ScalingNotUpdatedError(OdlinkException):
    pass


class UnknownBodyError(OdlinkException):
    pass


class UnknownEnumError(OdlinkException):
    pass


class UnrecognizedObservableTypeError(OdlinkException):
    pass


class UnrecognizedParameterKindError(OdlinkException):
    pass


class UnsupportedObservableForSizeError(OdlinkException):
    pass
