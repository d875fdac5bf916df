import pytest

from eldertheory.mentor.learning import ConvergenceAnalyzer, MentorLossFunction, MentorOptimizer


def test_needs_two_losses():
    assert ConvergenceAnalyzer([1.0], threshold=0.5).check_convergence() is False
    assert ConvergenceAnalyzer([], threshold=0.5).check_convergence() is False


def test_small_improvement_converges():
    analyzer = ConvergenceAnalyzer([1.0, 0.999], threshold=0.01)
    assert analyzer.check_convergence() is True


def test_large_improvement_does_not_converge():
    analyzer = ConvergenceAnalyzer([1.0, 0.5], threshold=0.01)
    assert analyzer.check_convergence() is False


def test_zero_previous_loss_does_not_raise():
    assert ConvergenceAnalyzer([0.0, 0.0], threshold=0.01).check_convergence() is False
    assert ConvergenceAnalyzer([0.0, 1.0], threshold=0.01).check_convergence() is True


def test_loss_is_zero_for_perfect_prediction():
    loss = MentorLossFunction()
    assert loss.calculate_loss([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == 0.0


def test_loss_is_symmetric_and_positive():
    loss = MentorLossFunction()
    a, b = [1.0, 4.0], [2.0, 2.0]
    assert loss.calculate_loss(a, b) == loss.calculate_loss(b, a)
    assert loss.calculate_loss(a, b) > 0


def test_loss_of_empty_is_nan():
    result = MentorLossFunction().calculate_loss([], [])
    assert repr(result) == "nan"


def test_loss_with_short_actual_raises():
    with pytest.raises(ValueError):
        MentorLossFunction().calculate_loss([1.0, 2.0], [1.0])


def test_update_parameters_in_place():
    optimizer = MentorOptimizer(learning_rate=0.5)
    params = {"w": 1.0, "b": 2.0}
    optimizer.update_parameters(params, {"w": 2.0})
    assert params == {"w": 0.0, "b": 2.0}


def test_zero_learning_rate_leaves_parameters():
    optimizer = MentorOptimizer(learning_rate=0.0)
    params = {"w": 1.5}
    optimizer.update_parameters(params, {"w": 3.0})
    assert params == {"w": 1.5}