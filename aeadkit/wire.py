"""
Wire codec
==========
Serializes key structures as protocol buffers, so stored keys can be read
by any protobuf implementation using the same schema:

    XChaCha20Poly1305Key        1: version (uint32)   3: key_value (bytes)
    XChaCha20Poly1305KeyFormat  (no fields)
    AesGcmKey                   1: version (uint32)   3: key_value (bytes)
    AesGcmKeyFormat             2: key_size (uint32)  3: version (uint32)
    KeyData                     1: type_url (string)  2: value (bytes)
                                3: key_material_type (KeyMaterialType)

The schema is declared in code with descriptor_pb2 and turned into message
classes at import time; no generated _pb2 module is shipped.

Managers receive a serialize/deserialize pair from this module; nothing else
in aeadkit depends on the encoding.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.message import DecodeError

from .errors import DeserializationFailure
from .keys import (
    AesGcmKey,
    AesGcmKeyFormat,
    KeyData,
    KeyMaterialType,
    XChaCha20Poly1305Key,
    XChaCha20Poly1305KeyFormat,
)

_PACKAGE = "aeadkit"
_Field   = descriptor_pb2.FieldDescriptorProto


def _build_schema() -> descriptor_pb2.FileDescriptorProto:
    proto = descriptor_pb2.FileDescriptorProto(
        name="aeadkit/keys.proto", package=_PACKAGE, syntax="proto3")

    enum = proto.enum_type.add(name="KeyMaterialType")
    for member in KeyMaterialType:
        enum.value.add(name=member.name, number=member.value)

    def message(name, *fields):
        msg = proto.message_type.add(name=name)
        for field_name, number, field_type, type_name in fields:
            field = msg.field.add(name=field_name, number=number,
                                  type=field_type, label=_Field.LABEL_OPTIONAL)
            if type_name:
                field.type_name = type_name

    message("XChaCha20Poly1305Key",
            ("version",   1, _Field.TYPE_UINT32, ""),
            ("key_value", 3, _Field.TYPE_BYTES,  ""))
    message("XChaCha20Poly1305KeyFormat")
    message("AesGcmKey",
            ("version",   1, _Field.TYPE_UINT32, ""),
            ("key_value", 3, _Field.TYPE_BYTES,  ""))
    message("AesGcmKeyFormat",
            ("key_size", 2, _Field.TYPE_UINT32, ""),
            ("version",  3, _Field.TYPE_UINT32, ""))
    message("KeyData",
            ("type_url",          1, _Field.TYPE_STRING, ""),
            ("value",             2, _Field.TYPE_BYTES,  ""),
            ("key_material_type", 3, _Field.TYPE_ENUM,
             f".{_PACKAGE}.KeyMaterialType"))
    return proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_schema().SerializeToString())


def _message_class(name: str):
    return message_factory.GetMessageClass(
        _pool.FindMessageTypeByName(f"{_PACKAGE}.{name}"))


XChaCha20Poly1305KeyProto       = _message_class("XChaCha20Poly1305Key")
XChaCha20Poly1305KeyFormatProto = _message_class("XChaCha20Poly1305KeyFormat")
AesGcmKeyProto                  = _message_class("AesGcmKey")
AesGcmKeyFormatProto            = _message_class("AesGcmKeyFormat")
KeyDataProto                    = _message_class("KeyData")


def _parse(message_class, data):
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise DeserializationFailure(
            f"expected bytes, got {type(data).__name__}")
    message = message_class()
    try:
        message.ParseFromString(bytes(data))
    except (DecodeError, UnicodeDecodeError) as e:
        raise DeserializationFailure(
            f"malformed {message_class.DESCRIPTOR.name}: {e}") from e
    return message


# -- XChaCha20-Poly1305 -------------------------------------------------------

def serialize_xchacha20poly1305_key(key: XChaCha20Poly1305Key) -> bytes:
    return XChaCha20Poly1305KeyProto(
        version=key.version, key_value=key.key_value).SerializeToString()


def deserialize_xchacha20poly1305_key(data: bytes) -> XChaCha20Poly1305Key:
    message = _parse(XChaCha20Poly1305KeyProto, data)
    return XChaCha20Poly1305Key(version=message.version,
                                key_value=message.key_value)


def serialize_xchacha20poly1305_key_format(
        key_format: XChaCha20Poly1305KeyFormat) -> bytes:
    return XChaCha20Poly1305KeyFormatProto().SerializeToString()


def deserialize_xchacha20poly1305_key_format(
        data: bytes) -> XChaCha20Poly1305KeyFormat:
    _parse(XChaCha20Poly1305KeyFormatProto, data)
    return XChaCha20Poly1305KeyFormat()


# -- AES-GCM ------------------------------------------------------------------

def serialize_aes_gcm_key(key: AesGcmKey) -> bytes:
    return AesGcmKeyProto(
        version=key.version, key_value=key.key_value).SerializeToString()


def deserialize_aes_gcm_key(data: bytes) -> AesGcmKey:
    message = _parse(AesGcmKeyProto, data)
    return AesGcmKey(version=message.version, key_value=message.key_value)


def serialize_aes_gcm_key_format(key_format: AesGcmKeyFormat) -> bytes:
    return AesGcmKeyFormatProto(
        key_size=key_format.key_size,
        version=key_format.version).SerializeToString()


def deserialize_aes_gcm_key_format(data: bytes) -> AesGcmKeyFormat:
    message = _parse(AesGcmKeyFormatProto, data)
    return AesGcmKeyFormat(key_size=message.key_size, version=message.version)


# -- KeyData envelope ---------------------------------------------------------

def serialize_key_data(key_data: KeyData) -> bytes:
    return KeyDataProto(
        type_url=key_data.type_url,
        value=key_data.value,
        key_material_type=int(key_data.key_material_type)).SerializeToString()


def deserialize_key_data(data: bytes) -> KeyData:
    message = _parse(KeyDataProto, data)
    # proto3 enums are open: values outside KeyMaterialType survive parsing
    try:
        material = KeyMaterialType(message.key_material_type)
    except ValueError as e:
        raise DeserializationFailure(
            f"unknown key material type {message.key_material_type}") from e
    return KeyData(type_url=message.type_url,
                   value=message.value,
                   key_material_type=material)
