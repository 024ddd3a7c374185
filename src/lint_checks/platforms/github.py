from typing import Any
import httpx
from .base import CheckPlatform


class GitHubChecksClient(CheckPlatform):
    # Required to access the Checks API during its preview period
    ACCEPT = "application/vnd.github.antiope-preview+json"

    def __init__(
        self,
        token: str,
        base_url: str = "https://api.github.com",
        user_agent: str = "lint-checks",
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": self.ACCEPT,
            "Authorization": f"Bearer {self.token}",
            "User-Agent": self.user_agent,
        }

    async def create_check_run(
        self,
        owner: str,
        repository: str | None,
        body: dict[str, Any],
    ) -> dict[str, Any]:
        async with httpx.AsyncClient() as client:
            response = await client.post(
                f"{self.base_url}/repos/{owner}/{repository}/check-runs",
                headers=self._headers(),
                json=body,
                timeout=30.0,
            )
            response.raise_for_status()
            return response.json()
