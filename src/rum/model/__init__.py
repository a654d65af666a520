"""Data models for installed styles, style schemas and prompts."""

from rum.model.question import Answer, AnswerValue, Option, Question, QuestionType
from rum.model.schema import SettingOption, SettingType, StyleDefinition, StyleSetting
from rum.model.style import Catalogue, OriginKind, StyleRecord

__all__ = [
    "Answer",
    "AnswerValue",
    "Catalogue",
    "Option",
    "OriginKind",
    "Question",
    "QuestionType",
    "SettingOption",
    "SettingType",
    "StyleDefinition",
    "StyleRecord",
    "StyleSetting",
]
