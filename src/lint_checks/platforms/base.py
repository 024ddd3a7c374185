from abc import ABC, abstractmethod
from typing import Any


class CheckPlatform(ABC):
    @abstractmethod
    async def create_check_run(
        self,
        owner: str,
        repository: str | None,
        body: dict[str, Any],
    ) -> dict[str, Any]:
        pass
