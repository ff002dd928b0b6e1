"""Exception hierarchy for the detection-and-resolution pipeline."""


class SkinGenieError(Exception):
    """Base class for every pipeline and workflow error."""


class EmptyInputError(SkinGenieError):
    """No image payload was supplied."""


class DecodeError(SkinGenieError):
    """The payload could not be decoded as an image."""


class ModelLoadError(SkinGenieError):
    """The classification model could not be built or its weights loaded."""


class ModelNotLoadedError(SkinGenieError):
    """Prediction was requested before the model finished loading."""


class ShapeMismatchError(SkinGenieError):
    """Model output width does not match the condition catalog."""


class InferenceError(SkinGenieError):
    """The forward pass failed."""


class InvalidDistributionError(SkinGenieError):
    """A probability vector cannot be classified."""


class UnknownConditionError(SkinGenieError):
    """A condition name is not in the catalog."""


class MissingPrescriptionError(SkinGenieError):
    """A catalog condition has no treatment record."""


class IllegalTransitionError(SkinGenieError):
    """The workflow was asked to move to a stage it cannot reach."""
