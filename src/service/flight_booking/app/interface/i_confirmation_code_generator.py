from abc import ABC, abstractmethod


class IConfirmationCodeGenerator(ABC):
    @abstractmethod
    def generate(self) -> str:
        pass
