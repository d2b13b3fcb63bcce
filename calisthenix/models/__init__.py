from calisthenix.models.user import User
from calisthenix.models.workout import Workout, WorkoutExercise, WorkoutStatusEnum
from calisthenix.models.exercise_library import ExerciseLibraryEntry, ExerciseCategoryEnum, DifficultyEnum
from calisthenix.models.template import WorkoutTemplate, WorkoutTemplateExercise, TemplateCategoryEnum
from calisthenix.models.journal import JournalEntry
from calisthenix.models.personal_record import PersonalRecord

__all__ = [
    "User",
    "Workout", "WorkoutExercise", "WorkoutStatusEnum",
    "ExerciseLibraryEntry", "ExerciseCategoryEnum", "DifficultyEnum",
    "WorkoutTemplate", "WorkoutTemplateExercise", "TemplateCategoryEnum",
    "JournalEntry",
    "PersonalRecord",
]
