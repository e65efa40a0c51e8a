"""
Key-manager interface
=====================
The capability set every algorithm's key manager provides. Managers do not
inherit from this class; they satisfy it structurally, and a registry can
select one at runtime by matching ``key_type()`` against a key's type URL.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from ..keys import KeyData


@runtime_checkable
class KeyManager(Protocol):

    def generate_key(self) -> Any: ...

    def validate(self, key: Any) -> None: ...

    def primitive_from_key(self, key: Any) -> Any: ...

    def primitive_from_serialized_key(self, serialized_key: bytes) -> Any: ...

    def new_key_from_format(self, key_format: Optional[Any] = None) -> Any: ...

    def new_key_from_serialized_format(
            self, serialized_format: Optional[bytes] = None) -> Any: ...

    def new_key_data(self, serialized_format: Optional[bytes] = None) -> KeyData: ...

    def supports_type(self, type_url: str) -> bool: ...

    def key_type(self) -> str: ...
