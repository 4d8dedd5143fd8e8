import unity_block.servers.messages as messages


class BaseControllerServerException(Exception):

    def __str__(self, *args, **kwargs):
        return self.message


class ValidationException(BaseControllerServerException):

    def __init__(self, msg):
        super().__init__()
        self.message = messages.VALIDATION_EXCEPTION_MESSAGE.format(msg)


class UnknownDriverError(BaseControllerServerException):

    def __init__(self, driver_name):
        super().__init__()
        self.message = messages.UNKNOWN_DRIVER_MESSAGE.format(driver_name)
