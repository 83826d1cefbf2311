from typing import List

from .model import Question

# Вбудований набір питань, коли клієнт не передав власних і не вказав quizId
DEFAULT_QUESTIONS: List[Question] = [
    Question("What is the capital of India?", ("Patna", "Delhi", "UP", "Bihar"), 1),
    Question("What is 2 + 2?", ("3", "4", "5", "6"), 1),
    Question("Who developed Android?", ("Apple", "Google", "Microsoft", "IBM"), 1),
    Question("Which planet is known as the Red Planet?", ("Earth", "Mars", "Jupiter", "Venus"), 1),
    Question("What is the square root of 16?", ("2", "3", "4", "5"), 2),
]
