# domain/entities/driver.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Driver:
    name: str

    def __str__(self) -> str:
        return self.name
