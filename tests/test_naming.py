import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from refgraph.analysis.naming import cluster_key, node_identifier, node_label, normalize_identifier


def test_label_strips_directory_and_extension_only():
    assert node_label("src/net/Http_Client.cpp") == "Http_Client"
    assert node_label("lib/jquery.min.js") == "jquery.min"
    assert node_label(".bashrc") == ".bashrc"


def test_identifier_case_folds_and_drops_underscores():
    assert node_identifier("src/Http_Client.cpp") == "httpclient"
    assert node_identifier("include/http_client.h") == "httpclient"


def test_identifier_case_sensitive_keeps_case():
    assert node_identifier("src/Http_Client.cpp", case_sensitive=True) == "HttpClient"
    assert normalize_identifier("Foo_Bar", case_sensitive=True) == "FooBar"


def test_cluster_key_is_parent_directory_name():
    assert cluster_key("project/x/a.txt") == "x"
    assert cluster_key("a.txt") == "."
