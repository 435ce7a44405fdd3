# Role: The two labels the classifier prompt asks the model to return.
# FlowController compares the raw model text against these values exactly.

from enum import Enum


class Classification(str, Enum):
    PROFESSOR_SPECIFIC = "Professor-Specific"
    CASUAL_CONVERSATION = "Casual Conversation"
