# seed.py
import logging

from quizhost.errors import Conflict
from quizhost.quiz_store import QuizStore

logger = logging.getLogger(__name__)

DEMO_QUIZ_ID = "vijnanakeralam_quiz"

DEMO_QUESTIONS = [
    {
        "prompt": "What is the full form of DWMS in the context of Kerala’s Knowledge Economy Mission?",
        "options": ["Digital Workforce Maintenance System", "Digital Working Management Software",
                    "Digital Workforce Management System", "Digital Workforce Management Software"],
        "correctOptionIndex": 2,
    },
    {
        "prompt": "What programming language is named after a type of Indonesian coffee?",
        "options": ["Rust", "Java", "php", "C#"],
        "correctOptionIndex": 1,
    },
    {
        "prompt": "Which application certifies English test in DWMS?",
        "options": ["British Council", "British Academy", "Council of Britain", "British University"],
        "correctOptionIndex": 0,
    },
    {
        "prompt": "Which authority provides employability skills training through DWMS?",
        "options": ["Wadhwani Foundation", "Adani Foundation", "TCS Ion", "Rightwalk Foundation"],
        "correctOptionIndex": 0,
    },
    {
        "prompt": "The E-commerce platform which got licence from RBI to function as an NBFC?",
        "options": ["Amazon", "Ebay", "Flipkart", "ONDC"],
        "correctOptionIndex": 2,
    },
    {
        "prompt": "Which of the following doesn't come under DWMS dashboard?",
        "options": ["Learning Circle", "Robotic Interview", "Career Counselling", "Skillgap Assessment"],
        "correctOptionIndex": 1,
    },
    {
        "prompt": "On October 8th 2024, National Film Awards for the year 2022 were declared and the award "
                  "for the best film was for a Malayalam film ATTAM. Who was the director of the film?",
        "options": ["Vishnu Mohan", "Anand Ekarshi", "Sajin Babu", "Kavya Prakash"],
        "correctOptionIndex": 1,
    },
    {
        "prompt": 'The course "Junior Cloud Core Engineer" comes under which domain?',
        "options": ["Artificial Intelligence and Machine Learning", "Automotive", "5G Technology", "Cybersecurity"],
        "correctOptionIndex": 3,
    },
    {
        "prompt": "The campaign launched by Kerala government in 2025 budget for Kerala's transition to a "
                  "knowledge economy, aiming to align skill development and employment creation?",
        "options": ["Knowledge Economy Mission", "Vijnana Keralam", "Navakeralam Karma Padhathi",
                    "Public Education Rejuvenation Campaign"],
        "correctOptionIndex": 1,
    },
    {
        "prompt": "Which country invented the cryptocurrency Bitcoin?",
        "options": ["Japan", "China", "USA", "India"],
        "correctOptionIndex": 2,
    },
]

def demo_quiz() -> dict:
    return {
        "id": DEMO_QUIZ_ID,
        "title": "Vijnana Keralam Quiz",
        "questions": DEMO_QUESTIONS,
        "timePerQuestionSeconds": 30,
        "isActive": True,
    }

def seed_demo_quiz(quizzes: QuizStore) -> bool:
    """Insert the demo quiz unless a quiz with its id exists. Returns True if inserted."""
    try:
        quizzes.create(demo_quiz())
    except Conflict:
        logger.info("Demo quiz %s already exists, leaving it as is", DEMO_QUIZ_ID)
        return False
    logger.info("Seeded demo quiz %s", DEMO_QUIZ_ID)
    return True
