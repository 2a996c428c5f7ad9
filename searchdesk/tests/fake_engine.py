"""
Minimal stand-in engine speaking the JSON-lines protocol, used by test_engine_client.

Replies to ``basic_search`` out of order when asked to (query "slow" is
answered after the next request), and exits on ``crash``.
"""
import json
import sys

RECORDS = [
    {"file_path": "C:\\docs\\a.txt", "name": "a.txt", "size": 10, "modified_time": 1700000000},
    {"file_path": "/home/me/b.md", "name": "b.md", "size": 20, "modified_time": 1700000100},
]


def reply(msg):
    sys.stdout.write(json.dumps(msg) + "\n")
    sys.stdout.flush()


def main():
    held = None
    for line in sys.stdin:
        req = json.loads(line)
        method, params, req_id = req["method"], req.get("params") or {}, req["id"]
        if method == "basic_search":
            query = params.get("query")
            if query == "slow":
                held = req_id
                continue
            reply({"id": req_id, "result": [r for r in RECORDS if query in r["name"]]})
            if held is not None:
                reply({"id": held, "result": []})
                held = None
        elif method == "advanced_search":
            reply({"id": req_id, "result": [{"file_path": "/x", "name": "x", "echo": params["filters"]}]})
        elif method == "preview_file":
            reply({"id": req_id, "result": f"contents of {params['path']}"})
        elif method == "highlight_content":
            reply({"id": req_id, "result": None})
        elif method == "bad_shape":
            reply({"id": req_id, "result": {"not": "a list"}})
        elif method == "crash":
            sys.stderr.write("crashing on request\n")
            sys.exit(3)
        elif method in ("scan_directory", "build_index"):
            reply({"id": req_id, "result": None})
        else:
            reply({"id": req_id, "error": f"unknown method {method}"})


if __name__ == "__main__":
    main()
