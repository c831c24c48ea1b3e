"""Static symptom catalog used to seed every new assessment.

Symptom identity is positional: a symptom's id is its 1-based index in
SYMPTOM_CATALOG. Stored assessments bind their severities to these
positions, so the catalog is append-only. Renaming or reordering an
existing entry rebinds historical data to a different symptom.
"""

from medassess.schemas.assessment import Symptom

SYMPTOM_CATALOG: tuple[tuple[str, str], ...] = (
    ("Fever", "General"),
    ("Headache", "Neurological"),
    ("Nausea", "Gastrointestinal"),
    ("Vomiting", "Gastrointestinal"),
    ("Chest Pain", "Cardiovascular"),
    ("Shortness of Breath", "Respiratory"),
    ("Cough", "Respiratory"),
    ("Sore Throat", "Respiratory"),
    ("Abdominal Pain", "Gastrointestinal"),
    ("Diarrhea", "Gastrointestinal"),
    ("Constipation", "Gastrointestinal"),
    ("Dizziness", "Neurological"),
    ("Fatigue", "General"),
    ("Joint Pain", "Musculoskeletal"),
    ("Muscle Aches", "Musculoskeletal"),
    ("Rash", "Dermatological"),
    ("Back Pain", "Musculoskeletal"),
    ("Anxiety", "Psychological"),
    ("Sleep Issues", "General"),
    ("Loss of Appetite", "General"),
)


def catalog_size() -> int:
    return len(SYMPTOM_CATALOG)


def blank_symptoms() -> list[Symptom]:
    """Build one zero-severity Symptom per catalog entry, in catalog order."""
    return [
        Symptom(id=index + 1, name=name, category=category)
        for index, (name, category) in enumerate(SYMPTOM_CATALOG)
    ]


def group_by_category(symptoms: list[Symptom]) -> dict[str, list[Symptom]]:
    """Group symptoms by category, categories in first-seen order."""
    groups: dict[str, list[Symptom]] = {}
    for symptom in symptoms:
        groups.setdefault(symptom.category, []).append(symptom)
    return groups
