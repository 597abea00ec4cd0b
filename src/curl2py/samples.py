"""Built-in sample cURL commands."""

SAMPLE_COMMANDS = (
    "curl 'https://api.github.com/users/octocat' -H 'Accept: application/json'",
    "curl -X POST 'https://httpbin.org/post' -H 'Content-Type: application/json' -d '{\"name\": \"John\"}'",
    "curl 'https://api.example.com/data' -H 'Authorization: Bearer token123' -b 'session=abc'",
    "curl -X PUT 'https://api.example.com/users/1' -u admin:pass -d '{\"status\": \"active\"}' -k",
)


def get_sample(index: int) -> str:
    """Return a sample by 1-based index, wrapping around past the end."""
    return SAMPLE_COMMANDS[(index - 1) % len(SAMPLE_COMMANDS)]
