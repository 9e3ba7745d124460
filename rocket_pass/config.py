"""
Configuration Management
========================

Explicit configuration for a rewards update run. Only the SerpAPI key comes
from the environment (or a .env file); everything else is a default or an
override passed by the caller.
"""

import os
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional

from dotenv import load_dotenv, find_dotenv


DEFAULT_SEASON = 21
DEFAULT_OUTPUT_PATH = os.path.join('.', 'src', 'data', 'rocket-pass.json')
WIKI_DOMAIN = 'rocketleague.fandom.com'
PLACEHOLDER_API_KEY = 'YOUR_SERPAPI_KEY_HERE'


@dataclass
class UpdaterConfig:
    """Settings for one update run."""
    season: int = DEFAULT_SEASON
    output_path: str = DEFAULT_OUTPUT_PATH
    serpapi_key: Optional[str] = None

    # Skip the search step when the page URL is already known
    wiki_url: Optional[str] = None
    wiki_domain: str = WIKI_DOMAIN
    search_results: int = 5
    request_timeout: int = 30
    dry_run: bool = False

    @classmethod
    def from_env(cls, **overrides) -> 'UpdaterConfig':
        """Load .env, read SERPAPI_KEY, then apply non-None overrides."""
        load_dotenv(find_dotenv(usecwd=True), override=False)

        config = cls(serpapi_key=os.getenv('SERPAPI_KEY'))
        for key, value in overrides.items():
            if value is None:
                continue
            if not hasattr(config, key):
                raise TypeError(f"Unknown config option: {key}")
            setattr(config, key, value)
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary (API key redacted)."""
        data = asdict(self)
        data['serpapi_key'] = '***' if self.serpapi_key else None
        return data
