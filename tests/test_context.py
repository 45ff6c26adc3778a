import pytest
from quantalogic_strictscope import (
    ContextKind,
    StrictScopeError,
    UndeclaredAssignmentError,
    UndeclaredVariableError,
    caller_frame,
    classify_caller,
    fixed_classifier,
)


def classify_source(source, filename):
    namespace = {"classify_caller": classify_caller}
    exec(compile(source, filename, "exec"), namespace)
    return namespace["kind"]


def test_function_caller_is_nested():
    assert classify_caller() is ContextKind.NESTED


def test_module_level_caller_is_main():
    assert classify_source("kind = classify_caller()", "<main>") is ContextKind.MAIN


def test_lambda_and_generator_callers_are_nested():
    source = "kind = (lambda: classify_caller())()"
    assert classify_source(source, "<main>") is ContextKind.NESTED
    source = "kind = next(classify_caller() for _ in range(1))"
    assert classify_source(source, "<main>") is ContextKind.NESTED


def test_frozen_code_is_native():
    assert classify_source("kind = classify_caller()", "<frozen importlib._bootstrap>") is ContextKind.NATIVE


def test_level_walks_outward():
    source = '''
def helper():
    return classify_caller(2)

kind = helper()
'''
    assert classify_source(source, "<main>") is ContextKind.MAIN


def test_exhausted_stack_is_native():
    assert classify_caller(100000) is ContextKind.NATIVE


def test_caller_frame_skips_package_frames():
    frame = caller_frame()
    assert frame.f_code.co_name == "test_caller_frame_skips_package_frames"


def test_fixed_classifier_ignores_level():
    classify = fixed_classifier(ContextKind.MAIN)
    assert classify() is ContextKind.MAIN
    assert classify(5) is ContextKind.MAIN


def test_errors_are_name_errors_with_messages():
    read_error = UndeclaredVariableError("x")
    write_error = UndeclaredAssignmentError("y")
    assert isinstance(read_error, StrictScopeError)
    assert isinstance(write_error, NameError)
    assert not isinstance(read_error, KeyError)
    assert str(read_error) == "variable 'x' is not declared"
    assert str(write_error) == "assignment to undeclared variable 'y'"
    assert write_error.name == "y"

    with pytest.raises(NameError):
        raise read_error
