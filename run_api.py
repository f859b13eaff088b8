"""
FastAPI server entry point for the YouTube Clipper AI.
"""

import os
import argparse
import uvicorn
from dotenv import load_dotenv

from clipper.config import config


def main():
    """Run the FastAPI server."""
    # Load environment variables
    load_dotenv()

    # Parse command line arguments
    parser = argparse.ArgumentParser(description="YouTube Clipper AI server")
    parser.add_argument("--host", default=config.HOST, help="Host to bind the server to")
    parser.add_argument("--port", type=int, default=config.PORT, help="Port to bind the server to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    # Print startup info
    print("=========================================")
    print(f"🚀 {config.APP_NAME} v{config.APP_VERSION}")
    print(f"📍 Port: {args.port}")
    print(f"🤖 AI: {'✅ Enabled' if config.ai_enabled() else '❌ No API key'}")
    print(f"Environment: {os.getenv('ENVIRONMENT', 'development')}")
    print("=========================================")

    # Run the server
    uvicorn.run(
        "clipper.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.LOG_LEVEL.lower() if hasattr(config, "LOG_LEVEL") else "info"
    )


if __name__ == "__main__":
    main()
