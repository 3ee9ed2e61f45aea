import logging

from sqlalchemy.orm import Session

from edugamify.repositories.quiz_repository import QuizRepository

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _question(question, options, correct_answer, points):
    return {
        "question": question,
        "options": options,
        "correctAnswer": correct_answer,
        "points": points,
    }


SAMPLE_QUIZZES = [
    {
        "title": "JavaScript Fundamentals",
        "description": "Test your knowledge of JavaScript basics",
        "difficulty": "beginner",
        "points": 100,
        "time_limit": 300,
        "subject": "javascript",
        "questions": [
            _question(
                "What is the correct way to declare a variable in JavaScript?",
                ["var myVar;", "variable myVar;", "v myVar;", "declare myVar;"],
                0,
                25,
            ),
            _question(
                "Which method is used to add an element to the end of an array?",
                ["append()", "push()", "add()", "insert()"],
                1,
                25,
            ),
            _question(
                "What does '===' operator do in JavaScript?",
                [
                    "Assignment",
                    "Comparison without type checking",
                    "Strict equality comparison",
                    "Not equal",
                ],
                2,
                25,
            ),
            _question(
                "How do you create a function in JavaScript?",
                [
                    "function myFunction() {}",
                    "create myFunction() {}",
                    "def myFunction() {}",
                    "func myFunction() {}",
                ],
                0,
                25,
            ),
        ],
    },
    {
        "title": "React Basics",
        "description": "Learn the fundamentals of React",
        "difficulty": "intermediate",
        "points": 150,
        "time_limit": 450,
        "subject": "react",
        "questions": [
            _question(
                "What is JSX?",
                [
                    "JavaScript XML",
                    "Java Syntax Extension",
                    "JSON Extension",
                    "JavaScript Extension",
                ],
                0,
                30,
            ),
            _question(
                "How do you create a React component?",
                [
                    "React.createComponent()",
                    "function Component() {}",
                    "new React.Component()",
                    "React.component()",
                ],
                1,
                30,
            ),
            _question(
                "What is the purpose of useState hook?",
                [
                    "To fetch data",
                    "To manage component state",
                    "To handle events",
                    "To create components",
                ],
                1,
                30,
            ),
            _question(
                "How do you pass data to a child component?",
                ["Through state", "Through props", "Through context", "Through refs"],
                1,
                30,
            ),
            _question(
                "What is the virtual DOM?",
                [
                    "A copy of the real DOM",
                    "A JavaScript representation of the DOM",
                    "A database",
                    "A server",
                ],
                1,
                30,
            ),
        ],
    },
    {
        "title": "Node.js Essentials",
        "description": "Master Node.js backend development",
        "difficulty": "advanced",
        "points": 200,
        "time_limit": 600,
        "subject": "nodejs",
        "questions": [
            _question(
                "What is Node.js?",
                [
                    "A JavaScript framework",
                    "A JavaScript runtime",
                    "A database",
                    "A web browser",
                ],
                1,
                40,
            ),
            _question(
                "Which module is used to create a web server in Node.js?",
                ["fs", "http", "path", "url"],
                1,
                40,
            ),
            _question(
                "What is npm?",
                [
                    "Node Package Manager",
                    "New Programming Method",
                    "Node Programming Module",
                    "Network Protocol Manager",
                ],
                0,
                40,
            ),
            _question(
                "How do you handle asynchronous operations in Node.js?",
                [
                    "Callbacks only",
                    "Promises only",
                    "Async/Await only",
                    "Callbacks, Promises, and Async/Await",
                ],
                3,
                40,
            ),
            _question(
                "What is Express.js?",
                [
                    "A database",
                    "A web framework for Node.js",
                    "A testing library",
                    "A package manager",
                ],
                1,
                40,
            ),
        ],
    },
]


def seed_sample_quizzes(db: Session) -> int:
    """Insert the sample quizzes when the catalog is empty. Returns how many were added."""
    repository = QuizRepository(db)
    if repository.count() > 0:
        return 0

    created = repository.create_bulk(SAMPLE_QUIZZES)
    logger.info(f"📚 Seeded {len(created)} sample quizzes")
    return len(created)
