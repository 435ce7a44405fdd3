# Role: Prompt template for message classification. The model must answer with one of the two
# Classification labels as plain text; FlowController matches that text exactly.

from __future__ import annotations

from profsync.models.classification import Classification


def build_classification_prompt(message: str) -> str:
    return f"""
You are an intelligent assistant for ProfSync, specializing in professors. Your task is to classify the message:
Message: "{message}"
Determine whether the message is related to professors (e.g., ratings, reviews, professor inquiries) or if it is a casual conversation.

Please return one of the following classifications (just text):
1. {Classification.PROFESSOR_SPECIFIC.value}
2. {Classification.CASUAL_CONVERSATION.value}
""".strip()
