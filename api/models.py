from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    # El id lo asigna el servicio remoto; se guarda como texto para usarlo de clave
    id: str
    name: str
    avatar: str

    @classmethod
    def from_json(cls, item: dict) -> "Record":
        return cls(
            id=str(item["id"]),
            name=str(item.get("name") or ""),
            avatar=str(item.get("avatar") or ""),
        )
