"""Builds protobuf message classes from descriptors declared in Python.

The wallet and stats schemas are small enough to declare directly as
FileDescriptorProtos; this keeps protoc out of the build.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

FieldDescriptorProto = descriptor_pb2.FieldDescriptorProto

_pool = descriptor_pool.DescriptorPool()


def field(name: str, number: int, type_: int, *, repeated: bool = False, type_name: str = ""):
    proto = FieldDescriptorProto(
        name=name,
        number=number,
        type=type_,
        label=FieldDescriptorProto.LABEL_REPEATED if repeated else FieldDescriptorProto.LABEL_OPTIONAL,
        json_name=_camel(name),
    )
    if type_name:
        proto.type_name = type_name
    return proto


def message(name: str, *fields) -> descriptor_pb2.DescriptorProto:
    return descriptor_pb2.DescriptorProto(name=name, field=list(fields))


def build_messages(filename: str, package: str, *messages) -> dict[str, type]:
    """Register a proto3 file in the private pool and return its message classes by name."""
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=filename,
        package=package,
        syntax="proto3",
        message_type=list(messages),
    )
    _pool.AddSerializedFile(file_proto.SerializeToString())
    return {
        m.name: message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{package}.{m.name}"))
        for m in messages
    }


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)
