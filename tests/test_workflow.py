"""Tests for core.workflow module."""

import re

import pytest

from core.errors import EmptyInputError, IllegalTransitionError, UnknownConditionError
from core.inference_engine import InferenceEngine
from core.skin_analyzer import SkinAnalyzer
from core.utils import Stage
from core.workflow import TRANSITIONS, WorkflowStateMachine, can_transition
from i18n import t


@pytest.fixture
def machine(qtbot, analyzer):
    m = WorkflowStateMachine(analyzer=analyzer)
    yield m
    m.shutdown()


@pytest.fixture
def failing_machine(qtbot, failing_engine):
    m = WorkflowStateMachine(analyzer=SkinAnalyzer(failing_engine))
    yield m
    m.shutdown()


def record_stages(machine):
    stages = []
    machine.stage_changed.connect(stages.append)
    return stages


def run_to_idle(qtbot, machine, image):
    machine.submit_image(image)
    qtbot.waitUntil(lambda: not machine.session.busy, timeout=30000)


class TestTransitionTable:
    def test_every_stage_can_reset(self):
        for stage in Stage:
            assert can_transition(stage, Stage.CAPTURE)

    def test_forward_path(self):
        assert can_transition(Stage.CAPTURE, Stage.PROCESSING)
        assert can_transition(Stage.PROCESSING, Stage.RESULT)
        assert can_transition(Stage.RESULT, Stage.PRESCRIPTION)

    def test_no_skipping(self):
        assert not can_transition(Stage.CAPTURE, Stage.RESULT)
        assert not can_transition(Stage.CAPTURE, Stage.PRESCRIPTION)
        assert not can_transition(Stage.PROCESSING, Stage.PRESCRIPTION)
        assert not can_transition(Stage.PRESCRIPTION, Stage.RESULT)

    def test_table_covers_all_stages(self):
        assert set(TRANSITIONS) == set(Stage)


class TestHappyPath:
    def test_capture_processing_result(self, qtbot, machine, sample_data_uri):
        stages = record_stages(machine)
        run_to_idle(qtbot, machine, sample_data_uri)

        assert stages == [Stage.PROCESSING, Stage.RESULT]
        session = machine.session
        assert session.stage is Stage.RESULT
        assert session.image == sample_data_uri
        assert session.error is None
        assert session.result.disease == "Eczema"
        assert session.prescription.medication == "Hydrocortisone"

    def test_confidence_has_one_decimal(self, qtbot, machine, sample_data_uri):
        run_to_idle(qtbot, machine, sample_data_uri)
        confidence = machine.session.result.confidence
        assert 0 <= confidence <= 100
        assert re.fullmatch(r"\d{1,3}\.\d", str(confidence))

    def test_show_prescription(self, qtbot, machine, sample_data_uri):
        run_to_idle(qtbot, machine, sample_data_uri)
        machine.show_prescription()
        assert machine.stage is Stage.PRESCRIPTION

    def test_busy_flag_signals(self, qtbot, machine, sample_data_uri):
        busy = []
        machine.busy_changed.connect(busy.append)
        run_to_idle(qtbot, machine, sample_data_uri)
        assert busy == [True, False]

    def test_progress_forwarded(self, qtbot, machine, sample_data_uri):
        steps = []
        machine.progress.connect(lambda step, total, msg: steps.append(step))
        run_to_idle(qtbot, machine, sample_data_uri)
        qtbot.waitUntil(lambda: len(steps) == 5)
        assert steps == [1, 2, 3, 4, 5]

    def test_real_model_end_to_end(self, qtbot, missing_weights, sample_data_uri):
        m = WorkflowStateMachine(engine=InferenceEngine(weights_path=missing_weights))
        try:
            run_to_idle(qtbot, m, sample_data_uri)
            assert m.stage is Stage.RESULT
            assert 0 <= m.session.result.confidence <= 100
        finally:
            m.shutdown()


class TestErrorPath:
    def test_corrupt_payload_returns_to_capture(self, qtbot, machine, corrupt_data_uri):
        stages = record_stages(machine)
        run_to_idle(qtbot, machine, corrupt_data_uri)

        assert stages == [Stage.PROCESSING, Stage.CAPTURE]
        assert machine.session.error == t("errors.analysis_failed")
        assert machine.session.image is None

    def test_inference_failure_returns_to_capture(self, qtbot, failing_machine, sample_data_uri):
        run_to_idle(qtbot, failing_machine, sample_data_uri)
        assert failing_machine.stage is Stage.CAPTURE
        assert failing_machine.session.error

    def test_retry_after_failure(self, qtbot, machine, sample_data_uri, corrupt_data_uri):
        run_to_idle(qtbot, machine, corrupt_data_uri)
        run_to_idle(qtbot, machine, sample_data_uri)
        assert machine.stage is Stage.RESULT
        assert machine.session.error is None

    def test_resource_law_across_runs(self, qtbot, machine, sample_data_uri, corrupt_data_uri):
        run_to_idle(qtbot, machine, corrupt_data_uri)
        run_to_idle(qtbot, machine, sample_data_uri)
        ledger = machine.analyzer.ledger
        assert ledger.allocated == 2
        assert ledger.balanced

    def test_dismiss_error(self, qtbot, machine, corrupt_data_uri):
        run_to_idle(qtbot, machine, corrupt_data_uri)
        machine.dismiss_error()
        assert machine.session.error is None


class TestIllegalTransitions:
    def test_prescription_without_result(self, machine):
        with pytest.raises(IllegalTransitionError):
            machine.show_prescription()
        assert machine.stage is Stage.CAPTURE

    def test_submit_while_busy(self, qtbot, machine, sample_data_uri):
        machine.submit_image(sample_data_uri)
        with pytest.raises(IllegalTransitionError):
            machine.submit_image(sample_data_uri)
        qtbot.waitUntil(lambda: not machine.session.busy, timeout=30000)

    def test_submit_from_result(self, qtbot, machine, sample_data_uri):
        run_to_idle(qtbot, machine, sample_data_uri)
        with pytest.raises(IllegalTransitionError):
            machine.submit_image(sample_data_uri)

    def test_submit_empty_image(self, machine):
        with pytest.raises(EmptyInputError):
            machine.submit_image("")
        assert machine.stage is Stage.CAPTURE
        assert machine.session.busy is False


class TestRestart:
    def test_full_reset(self, qtbot, machine, sample_data_uri):
        run_to_idle(qtbot, machine, sample_data_uri)
        machine.show_prescription()
        machine.restart()

        session = machine.session
        assert session.stage is Stage.CAPTURE
        assert session.image is None
        assert session.result is None
        assert session.prescription is None
        assert session.error is None

    def test_repeated_analyses(self, qtbot, machine, sample_data_uri):
        for _ in range(3):
            run_to_idle(qtbot, machine, sample_data_uri)
            assert machine.stage is Stage.RESULT
            machine.restart()
        assert machine.engine.build_count == 1

    def test_restart_during_run_discards_outcome(self, qtbot, machine, sample_data_uri):
        machine.submit_image(sample_data_uri)
        machine.restart()
        qtbot.waitUntil(lambda: not machine.session.busy, timeout=30000)
        assert machine.stage is Stage.CAPTURE
        assert machine.session.result is None


class TestResolve:
    def test_unknown_condition_leaves_session(self, qtbot, machine, sample_data_uri):
        run_to_idle(qtbot, machine, sample_data_uri)
        before = machine.session.result
        with pytest.raises(UnknownConditionError):
            machine.resolve("NonexistentCondition")
        assert machine.session.result is before
        assert machine.stage is Stage.RESULT


class TestStartup:
    def test_model_loads_in_background(self, qtbot, machine):
        with qtbot.waitSignal(machine.model_ready, timeout=30000):
            machine.start()
        assert machine.engine.is_loaded
        assert machine.engine.build_count == 1

    def test_load_failure_is_standing_error(self, qtbot, missing_weights):
        def broken():
            raise RuntimeError("cannot build")

        m = WorkflowStateMachine(engine=InferenceEngine(model_factory=broken, weights_path=missing_weights))
        try:
            with qtbot.waitSignal(m.error_changed, timeout=30000) as blocker:
                m.start()
            assert blocker.args == [t("errors.model_load_failed")]
            assert m.session.error == t("errors.model_load_failed")
            assert m.stage is Stage.CAPTURE
        finally:
            m.shutdown()

    def test_start_after_load_is_noop(self, qtbot, machine, sample_data_uri):
        run_to_idle(qtbot, machine, sample_data_uri)
        machine.start()
        assert machine.engine.build_count == 1
