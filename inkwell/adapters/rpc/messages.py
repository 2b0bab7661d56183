"""Runtime protobuf message classes for the ``blog.BlogService`` API.

The descriptor below mirrors ``blog.proto`` field for field, so no protoc
code-generation step is needed. Classes are registered in a private
descriptor pool to avoid clashing with any other ``blog`` package.
"""

from typing import Dict, List, Optional, Tuple

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

PACKAGE = "blog"
SERVICE_NAME = f"{PACKAGE}.BlogService"

_F = descriptor_pb2.FieldDescriptorProto
STRING, INT32, BOOL, MESSAGE = _F.TYPE_STRING, _F.TYPE_INT32, _F.TYPE_BOOL, _F.TYPE_MESSAGE

# message name -> [(field name, type, message type name or None, repeated)]
MESSAGE_FIELDS: Dict[str, List[Tuple[str, int, Optional[str], bool]]] = {
    "User": [
        ("id", STRING, None, False),
        ("username", STRING, None, False),
        ("email", STRING, None, False),
        ("created_at", STRING, None, False),
    ],
    "Post": [
        ("id", STRING, None, False),
        ("title", STRING, None, False),
        ("content", STRING, None, False),
        ("author_id", STRING, None, False),
        ("author_username", STRING, None, False),
        ("created_at", STRING, None, False),
        ("updated_at", STRING, None, False),
    ],
    "RegisterRequest": [
        ("username", STRING, None, False),
        ("email", STRING, None, False),
        ("password", STRING, None, False),
    ],
    "LoginRequest": [
        ("email", STRING, None, False),
        ("password", STRING, None, False),
    ],
    "AuthResponse": [
        ("token", STRING, None, False),
        ("user", MESSAGE, "User", False),
    ],
    "CreatePostRequest": [
        ("title", STRING, None, False),
        ("content", STRING, None, False),
    ],
    "GetPostRequest": [("id", STRING, None, False)],
    "UpdatePostRequest": [
        ("id", STRING, None, False),
        ("title", STRING, None, False),
        ("content", STRING, None, False),
    ],
    "DeletePostRequest": [("id", STRING, None, False)],
    "PostResponse": [("post", MESSAGE, "Post", False)],
    "DeleteResponse": [
        ("success", BOOL, None, False),
        ("message", STRING, None, False),
    ],
    "ListPostsRequest": [
        ("page", INT32, None, False),
        ("page_size", INT32, None, False),
    ],
    "ListPostsResponse": [
        ("posts", MESSAGE, "Post", True),
        ("total_count", INT32, None, False),
        ("page", INT32, None, False),
        ("page_size", INT32, None, False),
    ],
}

# rpc name -> (request message, response message)
METHOD_TYPES: Dict[str, Tuple[str, str]] = {
    "Register": ("RegisterRequest", "AuthResponse"),
    "Login": ("LoginRequest", "AuthResponse"),
    "CreatePost": ("CreatePostRequest", "PostResponse"),
    "GetPost": ("GetPostRequest", "PostResponse"),
    "UpdatePost": ("UpdatePostRequest", "PostResponse"),
    "DeletePost": ("DeletePostRequest", "DeleteResponse"),
    "ListPosts": ("ListPostsRequest", "ListPostsResponse"),
}


def build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="inkwell/blog.proto", package=PACKAGE, syntax="proto3"
    )
    for message_name, fields in MESSAGE_FIELDS.items():
        message = file_proto.message_type.add(name=message_name)
        for number, (field_name, field_type, type_name, repeated) in enumerate(fields, start=1):
            field = message.field.add(
                name=field_name,
                number=number,
                type=field_type,
                label=_F.LABEL_REPEATED if repeated else _F.LABEL_OPTIONAL,
            )
            if type_name:
                field.type_name = f".{PACKAGE}.{type_name}"

    service = file_proto.service.add(name="BlogService")
    for method_name, (request_name, response_name) in METHOD_TYPES.items():
        service.method.add(
            name=method_name,
            input_type=f".{PACKAGE}.{request_name}",
            output_type=f".{PACKAGE}.{response_name}",
        )
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(build_file_descriptor().SerializeToString())

_classes = {
    name: message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.{name}"))
    for name in MESSAGE_FIELDS
}

User = _classes["User"]
Post = _classes["Post"]
RegisterRequest = _classes["RegisterRequest"]
LoginRequest = _classes["LoginRequest"]
AuthResponse = _classes["AuthResponse"]
CreatePostRequest = _classes["CreatePostRequest"]
GetPostRequest = _classes["GetPostRequest"]
UpdatePostRequest = _classes["UpdatePostRequest"]
DeletePostRequest = _classes["DeletePostRequest"]
PostResponse = _classes["PostResponse"]
DeleteResponse = _classes["DeleteResponse"]
ListPostsRequest = _classes["ListPostsRequest"]
ListPostsResponse = _classes["ListPostsResponse"]

# rpc name -> (request class, response class)
METHODS = {
    method: (_classes[request], _classes[response])
    for method, (request, response) in METHOD_TYPES.items()
}


def method_path(method: str) -> str:
    """Full gRPC path, e.g. ``/blog.BlogService/Register``."""
    return f"/{SERVICE_NAME}/{method}"
