"""
Functional tests driven by the JSON cases in test_data/functional.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from graphql_to_elm.pipeline import CodeGeneratorConfig, PipelineGenerator


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory."""
    functional_dir = Path(__file__).parent / "test_data" / "functional"
    test_cases = []

    for json_file in sorted(functional_dir.glob("*_tests.json")):
        with open(json_file) as f:
            data = json.load(f)

        for test_case in data:
            test_case["_source_file"] = json_file.name
            test_cases.append(test_case)

    return test_cases


def _generate_code(schema, config_dict, module_name="TestModule"):
    """Helper to generate code with given schema and config."""
    config = CodeGeneratorConfig.from_dict(config_dict or {})
    return PipelineGenerator(module_name, schema, config).generate()


@pytest.mark.parametrize("test_case", load_all_test_cases(), ids=lambda tc: tc["name"])
def test_functional_generation(test_case):
    """Unified test for all JSON test cases using a single pattern."""
    print(f"\nTesting: {test_case['name']} (from {test_case['_source_file']})")
    print(f"Description: {test_case['description']}")

    generated_code = _generate_code(
        test_case["schema"],
        test_case.get("config", {}),
        test_case.get("module_name", "TestModule"),
    )

    for pattern in test_case.get("expected_contains", []):
        assert pattern in generated_code, f"Expected pattern '{pattern}' not found in output"

    for pattern in test_case.get("expected_not_contains", []):
        assert pattern not in generated_code, f"Unexpected pattern '{pattern}' found in output"

    # Patterns must appear in the listed order
    position = -1
    for pattern in test_case.get("expected_order", []):
        index = generated_code.find(pattern, position + 1)
        assert index > position, f"Pattern '{pattern}' missing or out of order"
        position = index


if __name__ == "__main__":
    pytest.main([__file__])
