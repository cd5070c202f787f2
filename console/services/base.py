import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from core.api_client import ApiClient
from core.errors import ApiError, UNEXPECTED_ERROR_MESSAGE
from schemas.base import CamelModel

logger = logging.getLogger(__name__)

ReadT = TypeVar("ReadT", bound=BaseModel)


class ResourceService(Generic[ReadT]):
    """Typed list/get/delete over one resource path on the remote service.

    Subclasses set `path` and `read_model` and add the create/update calls their
    resource supports. Errors from the client are passed through untouched; a
    body that does not match the read model becomes the generic ApiError.
    """

    path: str
    read_model: Type[ReadT]
    filter_param: Optional[str] = None

    def __init__(self, client: ApiClient):
        self.client = client

    def _item_path(self, item_id: int) -> str:
        return f"{self.path}/{item_id}"

    def _decode(self, adapter: TypeAdapter, data: Any) -> Any:
        try:
            return adapter.validate_python(data)
        except ValidationError as e:
            logger.warning("Unreadable %s response from %s: %s", self.read_model.__name__, self.path, e)
            raise ApiError(UNEXPECTED_ERROR_MESSAGE) from e

    def _read(self, data: Any) -> ReadT:
        return self._decode(TypeAdapter(self.read_model), data)

    def _read_list(self, data: Any) -> List[ReadT]:
        return self._decode(TypeAdapter(List[self.read_model]), data or [])

    async def get_all(self, filter_value: Any = None) -> List[ReadT]:
        params: Optional[Dict[str, Any]] = None
        if self.filter_param and filter_value:
            params = {self.filter_param: filter_value}
        data = await self.client.get(self.path, params=params)
        return self._read_list(data)

    async def get_by_id(self, item_id: int) -> ReadT:
        data = await self.client.get(self._item_path(item_id))
        return self._read(data)

    async def _create(self, payload: CamelModel) -> ReadT:
        data = await self.client.post(self.path, payload.to_payload())
        return self._read(data)

    async def _update(self, item_id: int, payload: CamelModel) -> ReadT:
        data = await self.client.put(self._item_path(item_id), payload.to_payload())
        return self._read(data)

    async def delete(self, item_id: int) -> None:
        await self.client.delete(self._item_path(item_id))
