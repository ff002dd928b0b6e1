"""SkinGenie — skin condition detection and treatment lookup.

Headless entry point: analyses one photo through the full workflow and prints
the detected condition and its treatment plan.

Usage:
    python main.py path/to/photo.jpg
    python main.py path/to/photo.jpg --prescription --verbose
"""

import argparse
import logging
import sys

from PyQt6.QtCore import QCoreApplication, QEventLoop, QTimer

import i18n
from core.utils import Stage, image_file_to_data_uri, validate_skin_image

logger = logging.getLogger(__name__)


def _print_result(session, show_prescription):
    result = session.result
    print(f"Detected condition: {result.disease} ({result.confidence}% confidence)")
    print(f"  {result.description}")
    for other in result.additional_conditions:
        print(f"  also possible: {other.name} ({other.confidence}%)")
    print()
    print(result.disclaimer)

    if not show_prescription:
        return
    rx = session.prescription
    print()
    print(f"Recommended treatment: {rx.medication}")
    print(f"  Dosage: {rx.dosage}")
    print(f"  Duration: {rx.duration}")
    print("  Precautions:")
    for precaution in rx.precautions:
        print(f"    - {precaution}")
    if rx.alternatives:
        print("  Alternatives: " + ", ".join(rx.alternatives))
    print("  Recommended products:")
    for product in rx.recommended_products:
        price = f" ({product.price})" if product.price else ""
        print(f"    - {product.name}{price}: {product.usage}")


def main():
    """Application entry point."""
    parser = argparse.ArgumentParser(description="Analyse a skin photo with SkinGenie.")
    parser.add_argument("image", help="Path to a photo of the affected skin area.")
    parser.add_argument("--prescription", action="store_true", help="Also print the treatment plan.")
    parser.add_argument(
        "--language", choices=i18n.available_languages(),
        help="Message language (defaults to the saved preference).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QCoreApplication(sys.argv)
    app.setApplicationName("SkinGenie")
    app.setApplicationVersion("1.0.0")
    app.setOrganizationName("SkinGenie")

    language = i18n.init(args.language)
    logger.debug("Messages in %s", language)

    validation = validate_skin_image(args.image)
    if not validation.valid:
        print(validation.error_message, file=sys.stderr)
        return 2

    # Imported after validation so a bad path fails fast without loading torch
    from core.workflow import WorkflowStateMachine

    machine = WorkflowStateMachine()
    loop = QEventLoop()

    def on_stage(stage):
        logger.info("Stage: %s", i18n.t(f"stage.{stage.value}"))
        if stage in (Stage.RESULT, Stage.CAPTURE):
            loop.quit()

    machine.stage_changed.connect(on_stage)
    machine.progress.connect(lambda step, total, msg: logger.info("[%d/%d] %s", step, total, msg))
    machine.start()

    QTimer.singleShot(0, lambda: machine.submit_image(image_file_to_data_uri(args.image)))
    loop.exec()

    machine.shutdown()
    session = machine.session
    if session.stage is not Stage.RESULT:
        print(session.error or i18n.t("errors.analysis_failed"), file=sys.stderr)
        return 1

    if args.prescription:
        machine.show_prescription()
    _print_result(session, args.prescription)
    return 0


if __name__ == "__main__":
    sys.exit(main())
