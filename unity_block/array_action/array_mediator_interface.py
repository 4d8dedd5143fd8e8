from abc import ABC, abstractmethod


class ArrayMediator(ABC):

    @abstractmethod
    def __init__(self, user, password, endpoint):
        """
        This is the init function for the class.
        it should establish the connection to the storage system.

        Args:
            user     : user name for connecting to the endpoint
            password : password for connecting to the endpoint
            endpoint : storage array fqdn or ip

        Raises:
            CredentialsError
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def serial_number(self):
        """
        Returns:
            the serial number of the storage system
        """
        raise NotImplementedError

    @abstractmethod
    def get_pool_by_id(self, pool_id):
        """
        This function should return the pool with the given id.

        Args:
            pool_id : id of the pool on the storage system

        Returns:
            Pool

        Raises:
            PoolDoesNotExist
        """
        raise NotImplementedError

    @abstractmethod
    def get_pool_by_name(self, pool_name):
        """
        This function should return the pool with the given name.

        Args:
            pool_name : name of the pool on the storage system

        Returns:
            Pool

        Raises:
            PoolDoesNotExist
        """
        raise NotImplementedError

    @abstractmethod
    def create_lun(self, pool_id, name, size_in_bytes):
        """
        This function should create a thin lun in the storage system.

        Args:
            pool_id       : id of the pool to create the lun in
            name          : name of the lun to be created in the storage system
            size_in_bytes : size in bytes of the lun

        Returns:
            Lun

        Raises:
            VolumeAlreadyExists
            PoolDoesNotExist
        """
        raise NotImplementedError

    @abstractmethod
    def get_luns(self, pool_id):
        """
        This function should return all the luns of a pool.

        Args:
            pool_id : id of the pool

        Returns:
            list of Lun
        """
        raise NotImplementedError

    @abstractmethod
    def get_lun_by_id(self, lun_id):
        """
        This function should return the lun with its current host associations.

        Args:
            lun_id : id of the lun

        Returns:
            Lun

        Raises:
            ObjectNotFoundError
        """
        raise NotImplementedError

    @abstractmethod
    def delete_lun(self, lun_id):
        """
        This function should delete a lun in the storage system.
        the lun is not detached first, the storage system may reject deleting an attached lun.

        Args:
            lun_id : id of the lun to delete

        Returns:
            None

        Raises:
            ObjectNotFoundError
        """
        raise NotImplementedError

    @abstractmethod
    def get_host_by_id(self, host_id):
        """
        Args:
            host_id : id of the host object on the storage system

        Returns:
            Host

        Raises:
            HostNotFoundError
        """
        raise NotImplementedError

    @abstractmethod
    def attach_host(self, lun_id, host_id):
        """
        This function should give a host access to a lun.

        Args:
            lun_id  : id of the lun
            host_id : id of the host

        Returns:
            None

        Raises:
            ObjectNotFoundError
            HostNotFoundError
            VolumeAlreadyAttachedError
        """
        raise NotImplementedError

    @abstractmethod
    def detach_host(self, lun_id, host_id):
        """
        This function should remove the access of a host to a lun.

        Args:
            lun_id  : id of the lun
            host_id : id of the host

        Returns:
            None

        Raises:
            ObjectNotFoundError
            HostNotFoundError
        """
        raise NotImplementedError

    @abstractmethod
    def detach_all_hosts(self, lun_id):
        """
        This function should remove the access of every host to a lun.

        Args:
            lun_id : id of the lun

        Returns:
            None

        Raises:
            ObjectNotFoundError
        """
        raise NotImplementedError
