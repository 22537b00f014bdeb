# Indentation added per level; fixed, not a runtime option
INDENT_UNIT = "  "

# Printed (after the current indentation) when exdent is called at depth 0
EXDENT_UNDERFLOW_MESSAGE = "Called exdent when indentation level was 0.\n"

# Each stack trace line is indented one extra step past the current indentation
TRACE_FRAME_PREFIX = "  "
# Innermost frames dropped from a trace: log_stack_trace itself and its caller
TRACE_SKIP_FRAMES = 2
