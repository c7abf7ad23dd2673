"""
Command Center - Main Application Entry Point

This module serves as the primary entry point for the Command Center dashboard.
It configures logging, builds the Gradio UI and launches the web interface.
"""
import logging

from command_center.config import settings as config
from command_center.ui.gradio_app import create_gradio_ui


def main():
    """
    Main entry point for the Command Center application.

    Initializes the Gradio interface and launches the web server.
    """
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    demo = create_gradio_ui()
    print("\n🚀 Launching Command Center...")

    server_name = config.GRADIO_SERVER_NAME
    server_port = config.GRADIO_SERVER_PORT

    print(f"📍 Server will be available at http://{server_name}:{server_port}")
    print(f"📄 Study plan: {config.STUDY_PLAN_PATH}")

    # Pass theme and css to launch() for Gradio 6.0+
    demo.launch(
        server_name=server_name,
        server_port=server_port,
        theme=demo.theme,
        css=demo.css
    )


if __name__ == "__main__":
    main()
