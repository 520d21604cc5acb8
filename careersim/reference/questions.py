"""
Scenario question bank.

Twelve scenario questions, four for each of the first three working years.
Each option carries a partial weight map over the axes; omitted axes weigh 0.

Question IDs follow the pattern y{year}q{n} and never change.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

import numpy as np

from .axes import AXES, N_AXES, axis_index

YEARS: Tuple[int, ...] = (1, 2, 3)


@dataclass(frozen=True)
class Option:
    """
    One selectable answer of a scenario question.

    Attributes:
        label: Display text
        weights: Signed weight per axis; axes not listed contribute 0
    """
    label: str
    weights: Mapping[str, float]

    def weight_vector(self) -> np.ndarray:
        """Return the weights as a zero-filled vector in canonical axis order."""
        vec = np.zeros(N_AXES, dtype=float)
        for axis, weight in self.weights.items():
            vec[axis_index(axis)] = weight
        return vec


@dataclass(frozen=True)
class Question:
    """
    A scenario question belonging to one working year.

    Attributes:
        id: Stable identifier, e.g. "y2q3"
        year: Working year (1, 2 or 3)
        text: Question text
        options: Two or more options
    """
    id: str
    year: int
    text: str
    options: Tuple[Option, ...]

    def option(self, index: int) -> Option:
        """
        Return the option at the given index.

        Raises:
            ValueError: If the index is not a valid option index
        """
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self.options):
            raise ValueError(
                f"Option index for {self.id} must be in [0, {len(self.options) - 1}], got {index!r}"
            )
        return self.options[index]


def _q(qid: str, year: int, text: str, *options: Tuple[str, Dict[str, float]]) -> Question:
    return Question(
        id=qid,
        year=year,
        text=text,
        options=tuple(Option(label=label, weights=MappingProxyType(dict(w))) for label, w in options),
    )


QUESTIONS: Tuple[Question, ...] = (
    # Year 1
    _q("y1q1", 1, "研修で最も大事にしたいのは？",
       ("同期との関わり", {"collab": 1}),
       ("先輩社員との関わり", {"collab": 0.5, "growth": 0.5}),
       ("業務理解", {"growth": 1})),
    _q("y1q2", 1, "学習スタイルは？",
       ("座学で体系化", {"stability": 1}),
       ("現場同行で体得", {"collab": 0.5, "growth": 0.5}),
       ("自習プロジェクトで試行", {"autonomy": 1})),
    _q("y1q3", 1, "仕事の振られ方は？",
       ("明確な指示で着実に", {"stability": 1}),
       ("ざっくり方針で調整", {"autonomy": 0.5, "growth": 0.5}),
       ("自分で提案して獲りに行く", {"autonomy": 1})),
    _q("y1q4", 1, "残業への姿勢は？",
       ("定時を基本に計画的に", {"worklife": 1}),
       ("必要時は柔軟に対応", {"worklife": 0.5, "growth": 0.5}),
       ("成果のためなら延長可", {"speed": 0.5, "growth": 0.5, "worklife": -0.5})),
    # Year 2
    _q("y2q1", 2, "難題に直面したとき？",
       ("まず周囲に相談", {"collab": 1}),
       ("自分で調査し提案", {"growth": 0.5, "autonomy": 0.5}),
       ("上司に報告し方向確認", {"stability": 1})),
    _q("y2q2", 2, "重視する評価軸は？",
       ("スピード", {"speed": 1}),
       ("品質の高さ", {"growth": 1}),
       ("再現可能な仕組み化", {"stability": 1})),
    _q("y2q3", 2, "責任の広げ方は？",
       ("任された範囲を堅実に", {"stability": 1}),
       ("周辺領域も巻き取る", {"growth": 0.5, "collab": 0.5}),
       ("新領域を提案して創る", {"autonomy": 1})),
    _q("y2q4", 2, "私生活の時間配分は？",
       ("資格・学習に投資", {"growth": 1}),
       ("趣味・家族時間を確保", {"worklife": 1}),
       ("副業・個人PJに挑戦", {"autonomy": 0.5, "speed": 0.5})),
    # Year 3
    _q("y3q1", 3, "次に優先するのは？",
       ("昇進・年収アップ", {"speed": 0.5, "growth": 0.5}),
       ("専門性の深化", {"growth": 1}),
       ("ワークライフの安定", {"worklife": 1})),
    _q("y3q2", 3, "年収と勤務地のトレードオフなら？",
       ("年収↑なら転居も可", {"speed": 0.5, "autonomy": 0.5, "worklife": -0.5}),
       ("同水準なら現状維持", {"stability": 1}),
       ("年収↓でも勤務地優先", {"worklife": 1})),
    _q("y3q3", 3, "好みのチーム文化は？",
       ("少数精鋭でスピード感", {"speed": 0.5, "growth": 0.5}),
       ("大規模で役割明確", {"stability": 1}),
       ("リモート分散で自由度", {"worklife": 0.5, "autonomy": 0.5})),
    _q("y3q4", 3, "3年目の選択は？",
       ("現職で昇進狙い", {"stability": 0.5, "speed": 0.5}),
       ("社内異動で最適化", {"collab": 0.5, "stability": 0.5}),
       ("転職準備を進める", {"autonomy": 0.5, "growth": 0.5})),
)

QUESTION_BANK: Mapping[str, Question] = MappingProxyType({q.id: q for q in QUESTIONS})


def get_question(question_id: str) -> Question:
    """Look up a question by ID; raises KeyError for unknown IDs."""
    try:
        return QUESTION_BANK[question_id]
    except KeyError:
        raise KeyError(f"Unknown question id: {question_id!r}") from None


def questions_for_year(year: int) -> List[Question]:
    """Return the questions of one working year in bank order."""
    if year not in YEARS:
        raise ValueError(f"year must be one of {YEARS}, got {year!r}")
    return [q for q in QUESTIONS if q.year == year]


def question_bank_issues() -> List[str]:
    """
    Validate the question bank.

    Returns:
        List of problems (empty if the bank is consistent)
    """
    issues = []
    seen = set()
    for q in QUESTIONS:
        if q.id in seen:
            issues.append(f"Duplicate question id: {q.id}")
        seen.add(q.id)
        if q.year not in YEARS:
            issues.append(f"{q.id}: year {q.year} not in {YEARS}")
        if not q.id.startswith(f"y{q.year}q"):
            issues.append(f"{q.id}: id does not match year {q.year}")
        if len(q.options) < 2:
            issues.append(f"{q.id}: needs at least 2 options")
        for opt in q.options:
            unknown = [axis for axis in opt.weights if axis not in AXES]
            if unknown:
                issues.append(f"{q.id}: option {opt.label!r} uses unknown axes {unknown}")
    return issues
