import datetime

from pydantic import BaseModel


class DailyStat(BaseModel):
    date: datetime.date
    count: int
    correct: int
    accuracy: int  # percent, 0-100


class OverviewStats(BaseModel):
    total: int
    correct: int
    accuracy: int  # percent, 0-100
    streak: int
    today: int
    this_week: int  # today and the six days before it
    unique_questions: int
