import json
from typing import Dict, List

from docsearch.core.exceptions import InvalidInput

def parse_tagged_collection(content: str) -> List[Dict[str, str]]:
    """Parse a collection file in .I / .T / .A / .W / .X format.

    ``.T`` lines become the title and ``.W`` lines the content; author and
    cross-reference sections are skipped.
    """
    documents = []
    current = None
    section = None

    for line in content.splitlines():
        line = line.rstrip()
        if line.startswith(".I"):
            if current is not None:
                documents.append(current)
            current = {"title": "", "content": ""}
            section = None
        elif line.startswith(".T"):
            section = "title"
        elif line.startswith(".W"):
            section = "content"
        elif line.startswith(".A") or line.startswith(".X") or line.startswith(".B"):
            section = None
        elif section and current is not None:
            current[section] = (current[section] + " " + line.strip()).strip()

    if current is not None:
        documents.append(current)

    return documents

def parse_json_documents(content: str) -> List[Dict[str, str]]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise InvalidInput(f"Invalid JSON document file: {e}")

    if isinstance(data, dict):
        data = data.get("documents")
    if not isinstance(data, list):
        raise InvalidInput("Invalid documents format")
    return data

def parse_documents_file(content: str, filename: str = "") -> List[Dict[str, str]]:
    if filename.lower().endswith(".json") or content.lstrip().startswith(("[", "{")):
        return parse_json_documents(content)
    if content.lstrip().startswith(".I"):
        return parse_tagged_collection(content)
    raise InvalidInput("Unsupported document file: expected a JSON array or a .I/.T/.W collection")
