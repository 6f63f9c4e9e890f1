import invoke


@invoke.task()
def test_run(ctx: invoke.Context):
    ctx.run("pytest --cov=optional_explanation --cov-report=xml:coverage.xml")


@invoke.task()
def demo(ctx: invoke.Context, log_level: str = "INFO"):
    ctx.run("python -m optional_explanation", env={"OPTIONAL_EXPLANATION_LOG_LEVEL": log_level})
