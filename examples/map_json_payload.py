"""Map a loosely typed JSON payload onto dataclasses through the transformer registry."""

from dataclasses import dataclass
from datetime import datetime

from chainkit.mapping import FieldSpec, dump_model, map_model, mapped


@mapped(
    FieldSpec("name", "str", keys=("name", "login"), required=True),
    FieldSpec("followers", "int", keys="stats.followers"),
)
@dataclass
class User:
    name: str
    followers: int = 0


@mapped(
    FieldSpec("id", "int", required=True),
    FieldSpec("user", model=User, required=True),
    FieldSpec("created", "datetime", keys=("created_at", "createdAt")),
    FieldSpec("tags", "str", many=True, default=()),
)
@dataclass
class Status:
    id: int
    user: User
    created: datetime | None = None
    tags: tuple[str, ...] | list[str] = ()


payload = {
    "id": "1024",
    "user": {"login": "ibireme", "stats": {"followers": "9000"}},
    "createdAt": 1458000000,
    "tags": ["ios", "json", 2016],
}

status = map_model(payload, Status)
print(status)
print(dump_model(status))
