import inspect

from decorator import decorator

from unity_block.common.driver_logger import get_stdout_logger
from unity_block.common.utils import set_current_thread_name

logger = get_stdout_logger()


def _get_call_argument(method, parameter_name, args, kwargs):
    if not parameter_name:
        return None
    bound_arguments = inspect.signature(method).bind_partial(*args, **kwargs)
    return bound_arguments.arguments.get(parameter_name)


def driver_method(object_id_parameter=''):
    @decorator
    def call_driver_method(method, *args, **kwargs):
        object_id = _get_call_argument(method, object_id_parameter, args, kwargs)
        set_current_thread_name(object_id)
        method_name = method.__name__
        logger.info(method_name)
        try:
            response = method(*args, **kwargs)
        except NotImplementedError as ex:
            logger.error("{} : {}".format(method_name, ex))
            raise
        except Exception as ex:
            logger.exception(ex)
            raise
        logger.info("finished {}".format(method_name))
        return response

    return call_driver_method
