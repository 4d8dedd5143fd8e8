import unity_block.array_action.messages as messages


class BaseArrayActionException(Exception):

    def __str__(self, *args, **kwargs):
        return self.message


# =============================================================================
# Configuration errors
# =============================================================================
class ConfigurationError(BaseArrayActionException):

    def __init__(self, message):
        super().__init__()
        self.message = message


class PoolParameterIsMissing(ConfigurationError):

    def __init__(self, pool_id_key, pool_name_key):
        message = messages.POOL_PARAMETER_IS_MISSING_MESSAGE.format(pool_id_key, pool_name_key)
        super().__init__(message)


class PoolDoesNotExist(ConfigurationError):

    def __init__(self, pool, array):
        message = messages.POOL_DOES_NOT_EXIST_MESSAGE.format(pool, array)
        super().__init__(message)


class CredentialsParameterIsMissing(ConfigurationError):

    def __init__(self, parameter):
        message = messages.CREDENTIALS_PARAMETER_IS_MISSING_MESSAGE.format(parameter)
        super().__init__(message)


# =============================================================================
# System errors
# =============================================================================
class CredentialsError(BaseArrayActionException):

    def __init__(self, endpoint):
        super().__init__()
        self.message = messages.CREDENTIALS_ERROR_MESSAGE.format(endpoint)


# =============================================================================
# Volume errors
# =============================================================================
class ObjectNotFoundError(BaseArrayActionException):

    def __init__(self, name):
        super().__init__()
        self.message = messages.OBJECT_NOT_FOUND_ERROR_MESSAGE.format(name)


class HostNotFoundError(BaseArrayActionException):

    def __init__(self, host_identifier):
        super().__init__()
        self.message = messages.HOST_NOT_FOUND_ERROR_MESSAGE.format(host_identifier)


class VolumeAlreadyExists(BaseArrayActionException):

    def __init__(self, volume_name, array):
        super().__init__()
        self.message = messages.VOLUME_ALREADY_EXISTS_MESSAGE.format(volume_name, array)


class VolumeAlreadyAttachedError(BaseArrayActionException):

    def __init__(self, volume_id, hosts, array_message=None):
        super().__init__()
        self.hosts = hosts
        self.message = messages.VOLUME_ALREADY_ATTACHED_ERROR_MESSAGE.format(volume_id, hosts)
        if array_message:
            self.message = "{} : {}".format(self.message, array_message)
