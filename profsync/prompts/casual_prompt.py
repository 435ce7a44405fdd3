# Role: Prompt for the casual-conversation branch (no retrieval).

from __future__ import annotations


def build_casual_prompt(message: str) -> str:
    return (
        "You are a friendly assistant of ProfSync that is similar to Rate My Professor. "
        f'Here is the user\'s message: "{message}". Respond accordingly.'
    )
