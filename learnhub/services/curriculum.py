"""Template-driven learning path generation.

Curricula for a few languages are authored up front; any other language gets
a one-module starter path built from boilerplate.
"""
import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class CurriculumModule:
    title: str
    description: str
    order: int
    topics: Tuple[str, ...]
    subtopics: Tuple[str, ...]
    examples: Tuple[str, ...]
    interview_questions: Tuple[str, ...]

    def as_content(self) -> Dict:
        """Shape stored in ``Module.content`` and read by the client."""
        return {
            "title": self.title,
            "description": self.description,
            "order": self.order,
            "topics": list(self.topics),
            "subtopics": list(self.subtopics),
            "examples": list(self.examples),
            "interviewQuestions": list(self.interview_questions),
        }


@dataclass(frozen=True)
class CurriculumTemplate:
    title: str
    description: str
    language: str
    difficulty: str
    modules: Tuple[CurriculumModule, ...]


LEARNING_TEMPLATES = MappingProxyType({
    "python": CurriculumTemplate(
        title="Complete Python Development",
        description="Master Python from basics to advanced web development",
        language="python",
        difficulty="intermediate",
        modules=(
            CurriculumModule(
                title="Python Fundamentals",
                description="Variables, data types, control structures, and functions",
                order=1,
                topics=("Variables & Data Types", "Control Flow", "Functions", "Error Handling"),
                subtopics=("strings, numbers, lists", "if/else, loops", "parameters, scope", "try/except blocks"),
                examples=("name = 'Alice'", "for i in range(10):", "def greet(name):", "try: int('abc')"),
                interview_questions=(
                    "What are Python's basic data types?",
                    "Explain list vs tuple differences",
                    "How does Python handle memory management?",
                ),
            ),
            CurriculumModule(
                title="Object-Oriented Programming",
                description="Classes, inheritance, polymorphism, and design patterns",
                order=2,
                topics=("Classes & Objects", "Inheritance", "Polymorphism", "Design Patterns"),
                subtopics=("__init__, methods", "super(), multiple inheritance", "method overriding",
                           "singleton, factory patterns"),
                examples=("class Person:", "class Student(Person):", "def speak(self):", "@staticmethod"),
                interview_questions=(
                    "Explain inheritance in Python",
                    "What is polymorphism?",
                    "Describe the MVC pattern",
                ),
            ),
            CurriculumModule(
                title="Web Development",
                description="Flask, Django, and REST API development",
                order=3,
                topics=("Flask Basics", "Django Framework", "REST APIs", "Database Integration"),
                subtopics=("routes, templates", "models, views", "JSON responses", "SQLAlchemy, ORM"),
                examples=("@app.route('/')", "class User(models.Model):", "return jsonify(data)",
                          "db.session.add(user)"),
                interview_questions=(
                    "Django vs Flask comparison",
                    "How to create REST APIs?",
                    "Explain ORM benefits",
                ),
            ),
            CurriculumModule(
                title="Advanced Concepts",
                description="Decorators, generators, async programming, and testing",
                order=4,
                topics=("Decorators", "Generators", "Async/Await", "Testing"),
                subtopics=("@decorator syntax", "yield keyword", "asyncio library", "unittest, pytest"),
                examples=("@functools.wraps", "yield value", "async def fetch():", "def test_function():"),
                interview_questions=(
                    "How do decorators work?",
                    "Explain generators vs lists",
                    "What is async programming?",
                ),
            ),
        ),
    ),
    "javascript": CurriculumTemplate(
        title="Modern JavaScript & React",
        description="Learn JavaScript ES6+ and React for modern web development",
        language="javascript",
        difficulty="beginner",
        modules=(
            CurriculumModule(
                title="JavaScript Fundamentals",
                description="ES6+ syntax, functions, and DOM manipulation",
                order=1,
                topics=("ES6+ Syntax", "Functions", "DOM Manipulation", "Event Handling"),
                subtopics=("let/const, arrow functions", "closures, callbacks", "querySelector, innerHTML",
                           "addEventListener"),
                examples=("const name = 'John'", "const add = (a, b) => a + b",
                          "document.querySelector('.btn')", "btn.addEventListener('click')"),
                interview_questions=(
                    "Difference between let, const, var?",
                    "Explain closures",
                    "What is event bubbling?",
                ),
            ),
            CurriculumModule(
                title="React Fundamentals",
                description="Components, JSX, state, and props",
                order=2,
                topics=("Components", "JSX", "State & Props", "Event Handling"),
                subtopics=("functional components", "JSX syntax rules", "useState hook", "onClick handlers"),
                examples=("function App() {", "<div className='container'>",
                          "const [count, setCount] = useState(0)", "onClick={() => setCount(count + 1)}"),
                interview_questions=(
                    "What is JSX?",
                    "Difference between state and props?",
                    "How do React hooks work?",
                ),
            ),
        ),
    ),
    "java": CurriculumTemplate(
        title="Enterprise Java Development",
        description="Build robust enterprise applications with Java and Spring",
        language="java",
        difficulty="advanced",
        modules=(
            CurriculumModule(
                title="Core Java",
                description="OOP principles, collections, and exception handling",
                order=1,
                topics=("OOP Principles", "Collections Framework", "Exception Handling", "Generics"),
                subtopics=("inheritance, polymorphism", "ArrayList, HashMap", "try-catch-finally",
                           "<T> generic types"),
                examples=("public class Student extends Person", "List<String> names = new ArrayList<>()",
                          "try { } catch (Exception e) { }", "public <T> void process(T item)"),
                interview_questions=(
                    "Explain Java inheritance",
                    "ArrayList vs LinkedList?",
                    "Checked vs unchecked exceptions?",
                ),
            ),
        ),
    ),
})


def supported_languages() -> List[str]:
    return sorted(LEARNING_TEMPLATES)


def _starter_template(language: str, experience: str) -> CurriculumTemplate:
    return CurriculumTemplate(
        title=f"{language} Learning Path",
        description=f"Comprehensive {language} programming course",
        language=language,
        difficulty=experience,
        modules=(
            CurriculumModule(
                title=f"{language} Basics",
                description=f"Introduction to {language} programming",
                order=1,
                topics=("Syntax", "Variables", "Functions", "Control Flow"),
                subtopics=("basic syntax", "data types", "function definitions", "loops and conditionals"),
                examples=("// Basic syntax example", "var x = 10;", "function hello() {}", "if (condition) {}"),
                interview_questions=(
                    f"What is {language} used for?",
                    "Explain basic syntax",
                    "How to define functions?",
                ),
            ),
        ),
    )


def generate_learning_path(language: str, goals: List[str], experience: str,
                           time_commitment: str) -> CurriculumTemplate:
    """Pick the authored curriculum for ``language`` or build a starter one.

    ``language`` and ``experience`` from the request replace the template's
    own values. ``goals`` and ``time_commitment`` do not shape the output yet.
    """
    template = LEARNING_TEMPLATES.get(language.strip().lower())
    if template is None:
        return _starter_template(language, experience)
    return dataclasses.replace(template, language=language, difficulty=experience)
