from typing import List, Optional
from supabase import Client

from ..domain.model import Question


class QuizRepository:
    """Читає збережені вікторини з таблиць quizzes / questions у Supabase."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def list_quizzes(self) -> List[dict]:
        res = (
            self.client.table("quizzes")
            .select("id,title,updated_at")
            .order("updated_at", desc=True)
            .execute()
        )
        return res.data or []

    def get_questions(self, quiz_id: str) -> Optional[List[Question]]:
        # maybe_single(): відсутній рядок дає None замість помилки
        quiz_res = (
            self.client.table("quizzes")
            .select("id")
            .eq("id", quiz_id)
            .maybe_single()
            .execute()
        )
        if quiz_res is None or not quiz_res.data:
            return None

        q_res = (
            self.client.table("questions")
            .select("question_text,answers,correct_answer,position")
            .eq("quiz_id", quiz_id)
            .order("position", desc=False)
            .execute()
        )
        return [Question.from_dict(row) for row in (q_res.data or [])]
