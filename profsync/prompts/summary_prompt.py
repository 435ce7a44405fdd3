# Role: Prompt for the professor branch. Receives the flattened review block produced by
# ReviewSearchClient.format_matches() and asks the model to answer the user from it.

from __future__ import annotations


def build_summary_prompt(search_results: str, message: str) -> str:
    return f"""
You're a friendly assistant of ProfSync that is similar to Rate My Professor and these are the matched results from the review index:
{search_results}

Can you please formulate the response for the user based on the following message: {message}
""".strip()
