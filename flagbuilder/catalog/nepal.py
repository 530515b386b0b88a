"""National flag of Nepal, per Schedule-1 of the Constitution."""

from __future__ import annotations

from flagbuilder.catalog.models import FlagColors, FlagDefinition, StepDescription
from flagbuilder.engine.builder import FlagConstructionEngine

_STEPS: list[tuple[str, str, float]] = [
    ("Draw line AB from left to right", "line", 2),
    ("Draw AC perpendicular to AB, AC = AB + 1/3 AB", "line", 2),
    ("Mark D on AC where AD = AB, join B and D", "line", 2),
    ("From BD mark off E making BE equal to AB", "point", 1),
    ("Draw line FG parallel to AB, FG = AB", "line", 2),
    ("Mark AH = 1/4 AB, draw HI parallel to AC", "line", 2),
    ("Bisect CF at J, draw JK parallel to AB", "line", 2),
    ("L is intersection of JK and HI", "point", 1),
    ("Join J and G", "line", 1),
    ("M is intersection of JG and HI", "point", 1),
    ("With centre M, mark N on HI", "point", 1),
    ("Draw line OM parallel to AB", "line", 1),
    ("Centre L, radius LN, draw semi-circle", "arc", 2),
    ("Centre M, radius MQ, draw semi-circle", "arc", 2),
    ("Centre N, radius NM, draw arc", "arc", 2),
    ("Centre T, radius TS, draw semi-circle", "arc", 2),
    ("Centre T, radius TM, draw arc", "arc", 2),
    ("Create 8 triangles for moon crescent", "triangle", 3),
    ("Bisect AF at U, draw UV parallel to AB", "line", 2),
    ("Centre W, radius MN, draw circle", "circle", 2),
    ("Centre W, radius LN, draw circle", "circle", 2),
    ("Create 12 triangles for sun rays", "triangle", 3),
    # Finishing steps, no engine geometry
    ("Add deep blue border, width = TN", "custom", 2),
    ("Complete flag construction", "custom", 2),
]

NEPAL = FlagDefinition(
    id="nepal",
    name="National Flag of Nepal",
    country="Nepal",
    type="pennon",
    official_source="Constitution of Nepal, Schedule-1 (Relating to clause (2) of Article 8)",
    adopted_date="1962-12-16",
    colors=FlagColors(primary="#DC143C", secondary="#FFFFFF", border="#003893"),
    construction_steps=[
        StepDescription(step=i, description=text, type=kind, duration=duration)
        for i, (text, kind, duration) in enumerate(_STEPS, start=1)
    ],
).with_engine(FlagConstructionEngine)
