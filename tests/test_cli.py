def test_show_catalog(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["show-catalog"])
    assert result.exit_code == 0
    assert "Widget: $5.00" in result.output
    assert "Gadget: $12.50" in result.output
