from dataclasses import dataclass
from typing import List, Literal, Optional
import yaml


SUPPORTED_OPERATIONS = ["put", "get", "remove", "keys", "values", "size"]
SupportedOperation = Literal["put", "get", "remove", "keys", "values", "size"]


@dataclass
class BenchConfig:
    size: int = 10_000
    repeat: int = 5
    number: int = 1
    operations: Optional[List[SupportedOperation]] = None

    def __post_init__(self):
        self.operations = list(self.operations or SUPPORTED_OPERATIONS)
        for field_name in ("size", "repeat", "number"):
            value = getattr(self, field_name)
            # bool is an int subclass, reject it explicitly
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{field_name} must be a positive integer")
        unknown = [op for op in self.operations if op not in SUPPORTED_OPERATIONS]
        if unknown:
            raise ValueError(
                f"unsupported operations {unknown}, operations must be in {SUPPORTED_OPERATIONS}"
            )

    @classmethod
    def from_yaml(cls, fileobj) -> "BenchConfig":
        data = yaml.safe_load(fileobj) or {}
        if not isinstance(data, dict):
            raise ValueError("configuration must be a mapping")
        operations = data.get("operations")
        if operations is not None and not isinstance(operations, list):
            raise ValueError("operations must be a list")
        return cls(
            size=data.get("size", cls.size),
            repeat=data.get("repeat", cls.repeat),
            number=data.get("number", cls.number),
            operations=operations,
        )
