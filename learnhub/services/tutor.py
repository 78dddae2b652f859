"""Rule-based tutor replies.

Rules are checked in order against the lowercased message and the first one
whose keywords appear wins. Nothing here calls a language model.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from ..schemas.chat import ChatResponse, CodeExample


@dataclass(frozen=True)
class TutorRule:
    name: str
    keywords: Tuple[str, ...]
    reply: ChatResponse

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


INHERITANCE_RULE = TutorRule(
    name="inheritance",
    keywords=("inheritance", "inherit"),
    reply=ChatResponse(
        message=(
            "Inheritance is a fundamental concept in object-oriented programming. It allows a class "
            "to inherit properties and methods from another class. The class that inherits is called "
            "a subclass or derived class, while the class being inherited from is called a superclass "
            "or base class."
        ),
        code_examples=[
            CodeExample(
                language="python",
                code=(
                    "class Animal:\n"
                    "    def __init__(self, name):\n"
                    "        self.name = name\n"
                    "\n"
                    "    def speak(self):\n"
                    "        pass\n"
                    "\n"
                    "class Dog(Animal):\n"
                    "    def speak(self):\n"
                    "        return f\"{self.name} says Woof!\""
                ),
                explanation="Dog class inherits from Animal class and overrides the speak method",
            )
        ],
        concepts=["Inheritance", "Method Overriding", "Base Classes"],
    ),
)

LOOP_RULE = TutorRule(
    name="loop",
    keywords=("loop", "for", "while"),
    reply=ChatResponse(
        message=(
            "Loops are control structures that repeat a block of code. The most common types are "
            "'for' loops (iterate over sequences) and 'while' loops (repeat while condition is true)."
        ),
        code_examples=[
            CodeExample(
                language="python",
                code=(
                    "# For loop\n"
                    "for i in range(5):\n"
                    "    print(f\"Number: {i}\")\n"
                    "\n"
                    "# While loop\n"
                    "count = 0\n"
                    "while count < 5:\n"
                    "    print(f\"Count: {count}\")\n"
                    "    count += 1"
                ),
                explanation="For loop iterates through a range, while loop continues until condition becomes false",
            )
        ],
        concepts=["For Loops", "While Loops", "Iteration"],
    ),
)

MEMORY_RULE = TutorRule(
    name="memory",
    keywords=("memory", "stack", "heap"),
    reply=ChatResponse(
        message=(
            "Memory management involves two main areas: Stack and Heap. Stack stores local variables "
            "and function calls (fast, automatic cleanup). Heap stores dynamic objects (slower, manual "
            "or garbage collected cleanup)."
        ),
        code_examples=[
            CodeExample(
                language="python",
                code=(
                    "def example():\n"
                    "    x = 10  # Stack: local variable\n"
                    "    y = [1, 2, 3, 4, 5]  # Heap: list object\n"
                    "    return y"
                ),
                explanation="Local variable x is stored on stack, list y is stored on heap",
            )
        ],
        concepts=["Stack Memory", "Heap Memory", "Memory Management"],
    ),
)

FUNCTION_RULE = TutorRule(
    name="function",
    keywords=("function", "method"),
    reply=ChatResponse(
        message=(
            "Functions are reusable blocks of code that perform specific tasks. They can accept "
            "parameters (inputs) and return values (outputs). This promotes code reusability and "
            "organization."
        ),
        code_examples=[
            CodeExample(
                language="python",
                code=(
                    "def calculate_area(length, width):\n"
                    "    \"\"\"Calculate rectangle area\"\"\"\n"
                    "    area = length * width\n"
                    "    return area\n"
                    "\n"
                    "# Usage\n"
                    "result = calculate_area(5, 3)\n"
                    "print(f\"Area: {result}\")"
                ),
                explanation="Function takes parameters, performs calculation, and returns result",
            )
        ],
        concepts=["Functions", "Parameters", "Return Values"],
    ),
)

FALLBACK_REPLY = ChatResponse(
    message=(
        "I'm here to help you learn programming! You can ask me about concepts like inheritance, "
        "loops, memory management, functions, data structures, algorithms, and more. What specific "
        "topic would you like to explore?"
    ),
    code_examples=[],
    concepts=["Programming Concepts", "Learning", "Education"],
)

# Order matters: a message mentioning both loops and inheritance gets the inheritance answer.
RULES = (INHERITANCE_RULE, LOOP_RULE, MEMORY_RULE, FUNCTION_RULE)


def match_rule(message: str) -> Optional[TutorRule]:
    text = message.lower()
    for rule in RULES:
        if rule.matches(text):
            return rule
    return None


def respond(message: str, context: Optional[str] = None) -> ChatResponse:
    """Return the canned reply for the first rule matching ``message``.

    ``context`` is accepted for API compatibility and ignored.
    """
    rule = match_rule(message)
    reply = rule.reply if rule else FALLBACK_REPLY
    return reply.model_copy(deep=True)
