import yaml
from typing import Dict


class YAMLTypeExporter:
    """
    Exports rendered column types into YAML format.
    """

    def __init__(self, result: Dict):
        """
        :param result: Result dictionary produced by the router or config executor
        """
        self.result = result

    def export_to_string(self) -> str:
        return yaml.safe_dump(
            self.result,
            sort_keys=False,
            default_flow_style=False
        )

    def export_to_file(self, file_path: str):
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(self.export_to_string())
