pytest_plugins = ["pytester", "expected_logs.pytest_plugin"]
