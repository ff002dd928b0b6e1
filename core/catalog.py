"""Catalog of skin conditions recognised by the classification model.

The order of CONDITION_CATALOG is the positional mapping of the model's output
vector. Trained weights depend on it: append new conditions, never reorder.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple


@dataclass(frozen=True)
class Condition:
    """A skin condition the model can detect."""
    id: str
    name: str
    description: str
    symptoms: Tuple[str, ...]
    common_areas: Tuple[str, ...]


CONDITION_CATALOG: Tuple[Condition, ...] = (
    Condition(
        id="melanoma",
        name="Melanoma",
        description="A serious form of skin cancer that begins in melanocytes (pigment-producing cells).",
        symptoms=("Asymmetrical moles", "Border irregularity", "Color variations", "Diameter > 6mm", "Evolving size/shape"),
        common_areas=("Back", "Legs", "Arms", "Face"),
    ),
    Condition(
        id="vitiligo",
        name="Vitiligo",
        description="An autoimmune condition causing loss of skin pigmentation in patches.",
        symptoms=("White patches on skin", "Premature graying", "Loss of color inside mouth", "Loss of color in hair"),
        common_areas=("Face", "Hands", "Arms", "Genitals"),
    ),
    Condition(
        id="melasma",
        name="Melasma",
        description="A condition causing brown to gray-brown patches on the face.",
        symptoms=("Dark patches", "Symmetrical patches", "Increased pigmentation", "Sun sensitivity"),
        common_areas=("Cheeks", "Bridge of nose", "Forehead", "Upper lip"),
    ),
    Condition(
        id="impetigo",
        name="Impetigo",
        description="A highly contagious bacterial skin infection common in children.",
        symptoms=("Red sores", "Honey-colored crusts", "Itching", "Fluid-filled blisters"),
        common_areas=("Face", "Arms", "Legs"),
    ),
    Condition(
        id="acne_vulgaris",
        name="Acne Vulgaris",
        description="Inflammatory condition characterized by pimples, particularly on the face.",
        symptoms=("Pimples", "Blackheads", "Whiteheads", "Inflammation"),
        common_areas=("Face", "Chest", "Back"),
    ),
    Condition(
        id="eczema",
        name="Eczema",
        description="Chronic condition causing dry, itchy, and inflamed skin.",
        symptoms=("Itching", "Dry skin", "Redness", "Inflammation"),
        common_areas=("Arms", "Knees", "Neck"),
    ),
    Condition(
        id="rosacea",
        name="Rosacea",
        description="Chronic condition causing redness and visible blood vessels in face.",
        symptoms=("Facial redness", "Visible blood vessels", "Bumps", "Skin sensitivity"),
        common_areas=("Cheeks", "Nose", "Chin"),
    ),
    Condition(
        id="seborrheic_dermatitis",
        name="Seborrheic Dermatitis",
        description="Condition causing scaly patches and red skin.",
        symptoms=("Scaly patches", "Redness", "Itching", "Flaking"),
        common_areas=("Scalp", "Face", "Upper body"),
    ),
    Condition(
        id="contact_dermatitis",
        name="Contact Dermatitis",
        description="Skin inflammation caused by direct contact with an irritant or allergen.",
        symptoms=("Redness", "Itching", "Burning", "Skin rash"),
        common_areas=("Hands", "Face", "Neck"),
    ),
    Condition(
        id="psoriasis",
        name="Psoriasis",
        description="Chronic autoimmune condition causing rapid skin cell buildup.",
        symptoms=("Thick red patches", "Silver scales", "Dry skin", "Itching"),
        common_areas=("Elbows", "Knees", "Scalp"),
    ),
    Condition(
        id="fungal_infection",
        name="Fungal Infection",
        description="Skin infection caused by various types of fungi.",
        symptoms=("Itching", "Redness", "Scaling", "Ring-like pattern"),
        common_areas=("Feet", "Groin", "Scalp"),
    ),
    Condition(
        id="urticaria",
        name="Urticaria (Hives)",
        description="Raised, itchy welts that appear suddenly on the skin.",
        symptoms=("Raised welts", "Intense itching", "Swelling", "Redness"),
        common_areas=("Any part of body",),
    ),
    Condition(
        id="folliculitis",
        name="Folliculitis",
        description="Inflammation of hair follicles due to bacterial or fungal infection.",
        symptoms=("Small red bumps", "Itching", "Tenderness", "Pus-filled blisters"),
        common_areas=("Scalp", "Beard area", "Arms", "Legs"),
    ),
    Condition(
        id="hyperpigmentation",
        name="Hyperpigmentation",
        description="Darkening of areas of skin due to increased melanin production.",
        symptoms=("Dark patches", "Uneven skin tone", "Sun spots", "Age spots"),
        common_areas=("Face", "Hands", "Neck"),
    ),
)

NUM_CONDITIONS = len(CONDITION_CATALOG)

CONDITIONS_BY_ID = MappingProxyType({c.id: c for c in CONDITION_CATALOG})
CONDITIONS_BY_NAME = MappingProxyType({c.name: c for c in CONDITION_CATALOG})
