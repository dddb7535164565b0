from abc import ABC, abstractmethod


class EmailValidator(ABC):
    @abstractmethod
    def validate(self, email: str) -> bool:
        pass
