"""
Graph File Import
-----------------
This module introduces tools that allow importing dialogue graphs from json/yaml files.

A file should contain a dictionary following the :py:class:`~graphbot.core.graph.DialogueGraph` data model:

.. code-block:: yaml

    root: 0
    nodes:
      - id: 0
        answers: ["Hello!"]
        edges:
          - target: 1
            keywords: ["weather", "forecast"]
      - id: 1
        answers: ["It is sunny today."]
"""

from typing import Union
import logging
from pathlib import Path
import json

try:
    import yaml

    yaml_available = True
except ImportError:
    yaml_available = False


logger = logging.getLogger(__name__)


class GraphImportError(Exception):
    """An exception for incorrect usage of :py:class:`GraphImporter`."""


class GraphImporter:
    """
    Enables dialogue graph import from file.

    Since :py:class:`~graphbot.core.graph.DialogueGraph` is a pydantic ``BaseModel``,
    the only purpose of this class is to read a dictionary from a file;
    the dictionary is validated by the graph itself.
    """

    JSON_SUFFIXES = (".json",)
    """File extensions read with :py:mod:`json`."""
    YAML_SUFFIXES = (".yaml", ".yml")
    """File extensions read with ``pyyaml``."""

    def import_graph_file(self, file: Union[str, Path]) -> dict:
        """
        Import a dictionary from a json/yaml file.

        :return: Graph records read from the file.
        :raises GraphImportError: If a file does not have a correct file extension.
        :raises GraphImportError: If an imported object from file is not a dictionary.
        :raises ImportError: If a yaml file is imported while ``pyyaml`` is not installed.
        """
        file = Path(file).absolute()

        with open(file, "r", encoding="utf-8") as fd:
            if file.suffix in self.JSON_SUFFIXES:
                graph = json.load(fd)
            elif file.suffix in self.YAML_SUFFIXES:
                if not yaml_available:
                    raise ImportError("`pyyaml` package is missing.\nRun `pip install graphbot[yaml]`.")
                graph = yaml.safe_load(fd)
            else:
                raise GraphImportError("File should have a `.json`, `.yaml` or `.yml` extension")
        if not isinstance(graph, dict):
            raise GraphImportError("File should contain a dict")

        logger.info(f"Loaded file {file}")
        return graph
