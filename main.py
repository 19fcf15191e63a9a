import argparse
import json
import sys

from core.config.app_config import AppConfig
from core.logger import setup_exception_hook
from core.services.translation_service import TranslationService
from server.tools import call_tool, list_tools


def main(argv=None):
    parser = argparse.ArgumentParser(description="Angular i18n translation-file tools")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP tool server")
    serve.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve.add_argument("--port", type=int, default=8000, help="Port")

    sub.add_parser("tools", help="Print the tool descriptors as JSON")

    call = sub.add_parser("call", help="Invoke one tool and print its result")
    call.add_argument("name", help="Tool name, e.g. list_new_translations")
    call.add_argument("--args", default="{}", help='JSON arguments, e.g. \'{"locale": "de"}\'')

    args = parser.parse_args(argv)
    setup_exception_hook()

    if args.command == "tools":
        print(json.dumps(list_tools(), indent=2))
        return 0

    service = TranslationService(AppConfig.from_env())

    if args.command == "serve":
        import uvicorn
        from server.app import create_app
        uvicorn.run(create_app(service), host=args.host, port=args.port)
        return 0

    try:
        arguments = json.loads(args.args)
    except json.JSONDecodeError as e:
        print(f"Error: --args is not valid JSON: {e}", file=sys.stderr)
        return 2

    result = call_tool(service, args.name, arguments)
    text = result["content"][0]["text"]
    if result["isError"]:
        print(f"Error: {text}", file=sys.stderr)
        return 1
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
