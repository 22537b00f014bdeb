from indentlog import IndentingLogger


def _helper_that_traces(log):
    log.log_stack_trace()


def test_stack_trace_starts_at_caller_of_caller(capsys):
    log = IndentingLogger()
    _helper_that_traces(log)
    lines = capsys.readouterr().out.splitlines()
    assert lines, "expected at least one frame"
    # log_stack_trace and its direct caller are skipped
    assert all("_helper_that_traces" not in line for line in lines)
    assert all("log_stack_trace" not in line for line in lines)
    assert lines[0].startswith("  test_stack_trace_starts_at_caller_of_caller (")
    assert "test_stack_trace.py" in lines[0]


def test_stack_trace_lines_follow_current_indentation(capsys):
    log = IndentingLogger()
    log.indent()
    _helper_that_traces(log)
    lines = capsys.readouterr().out.splitlines()
    assert lines
    for line in lines:
        assert line.startswith("    ")
        assert not line.startswith("     ")


def test_exdent_underflow_trace_starts_at_exdent_caller(capsys):
    log = IndentingLogger()
    log.exdent()
    lines = capsys.readouterr().out.splitlines()
    assert lines[1].startswith("  test_exdent_underflow_trace_starts_at_exdent_caller (")
    assert all(" exdent (" not in line for line in lines)


def test_disabled_stack_trace_prints_nothing(capsys):
    log = IndentingLogger(enabled=False)
    _helper_that_traces(log)
    assert capsys.readouterr().out == ""
