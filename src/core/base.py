from src.modules.access_keys.collaborators import AccessKeyStore
from src.utils.logger import get_logger


class BaseService:
    """Base service class with access key store injection."""

    def __init__(self, store: AccessKeyStore):
        self.store = store
        self.logger = get_logger(self.__class__.__name__)
