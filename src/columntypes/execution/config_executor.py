import os
from typing import Dict

import yaml

from columntypes.governance.dialect import Dialect
from columntypes.outputs.yaml_exporter import YAMLTypeExporter
from columntypes.router import compare_column_sets, render_columns
from columntypes.observability.logger import log_event, generate_request_id, RequestTimer
from columntypes.utils.exceptions import ConfigurationError


class ConfigExecutor:
    """
    Renders column types in batch using YAML configuration.

    dialect: postgres
    output_path: outputs/column_types.yaml
    columns: [...]
    compare:
      old: [...]
      new: [...]
    """

    def __init__(self, config_path: str):
        self.config_path = config_path
        self.config = self._load_config()

    # ------------------------------------------
    # Load YAML
    # ------------------------------------------
    def _load_config(self) -> Dict:
        if not os.path.exists(self.config_path):
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, "r", encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Config file must contain a mapping: {self.config_path}"
            )

        if not isinstance(config.get("columns", []), list):
            raise ConfigurationError("'columns' must be a list")

        compare = config.get("compare")
        if compare is not None:
            if not isinstance(compare, dict) or not isinstance(compare.get("old"), list) \
                    or not isinstance(compare.get("new"), list):
                raise ConfigurationError("'compare' requires 'old' and 'new' column lists")

        return config

    # ------------------------------------------
    # Execute
    # ------------------------------------------
    def execute(self) -> Dict:
        request_id = generate_request_id()
        timer = RequestTimer()
        dialect = Dialect.from_name(self.config.get("dialect"))

        result = {
            "dialect": dialect.value,
            "columns": render_columns(self.config.get("columns", []), dialect),
        }

        compare = self.config.get("compare")
        if compare:
            result["column_diff"] = compare_column_sets(
                compare["old"], compare["new"], dialect
            )

        output_path = self.config.get("output_path")
        if output_path:
            self._save_output(result, output_path)

        log_event("CONFIG_EXECUTION_COMPLETED", {
            "request_id": request_id,
            "config_path": self.config_path,
            "dialect": dialect.value,
            "columns": len(result["columns"]),
            "output_path": output_path,
            "duration_seconds": timer.duration(),
        })
        return result

    # ------------------------------------------
    # Save Output
    # ------------------------------------------
    def _save_output(self, result: Dict, output_path: str):
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        YAMLTypeExporter(result).export_to_file(output_path)
