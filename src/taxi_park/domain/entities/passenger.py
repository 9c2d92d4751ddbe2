# domain/entities/passenger.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Passenger:
    name: str

    def __str__(self) -> str:
        return self.name
