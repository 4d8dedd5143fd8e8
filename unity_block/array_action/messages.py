CREDENTIALS_ERROR_MESSAGE = "Credential error has occurred while connecting to endpoint : {0} "

CREDENTIALS_PARAMETER_IS_MISSING_MESSAGE = "Connection parameter is mandatory : {0}"

OBJECT_NOT_FOUND_ERROR_MESSAGE = "Object was not found : {0} "

HOST_NOT_FOUND_ERROR_MESSAGE = "Host was not found : {0} , ensure the host is registered on the array"

POOL_DOES_NOT_EXIST_MESSAGE = "Pool does not exist: {0} , array : {1}"

POOL_PARAMETER_IS_MISSING_MESSAGE = "Pool parameter is mandatory, set either {0} or {1}"

VOLUME_ALREADY_EXISTS_MESSAGE = "Volume already exists : {0} , array : {1}"

VOLUME_ALREADY_ATTACHED_ERROR_MESSAGE = "Volume : {0} is already attached to hosts : {1}"
