"""Browser-like request headers for fetching news pages."""

import random

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)


class UserAgentRotator:
    """Pool of realistic desktop user agents.

    Attributes:
        USER_AGENTS: User agents to choose from

    """

    USER_AGENTS = [
        DEFAULT_USER_AGENT,
        'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0',
        'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.1 Safari/605.1.15',
        'Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
    ]

    @classmethod
    def get_random(cls) -> str:
        """Return a random user agent from the pool."""
        return random.choice(cls.USER_AGENTS)


def build_headers(user_agent: str | None = None) -> dict[str, str]:
    """Build request headers for an HTML page fetch.

    Args:
        user_agent: User agent to send. A random one from the pool when None.

    Returns:
        Header dictionary for requests.

    """
    user_agent = user_agent or UserAgentRotator.get_random()

    headers = {
        'User-Agent': user_agent,
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        'Accept-Language': 'en-US,en;q=0.9',
        'Accept-Encoding': 'gzip, deflate',
        'Connection': 'keep-alive',
        'Upgrade-Insecure-Requests': '1',
    }

    # Sec-Fetch-* headers are only sent by Chromium based browsers
    if 'Chrome' in user_agent:
        headers.update(
            {
                'Sec-Fetch-Dest': 'document',
                'Sec-Fetch-Mode': 'navigate',
                'Sec-Fetch-Site': 'none',
                'Sec-Fetch-User': '?1',
            }
        )

    return headers
