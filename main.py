import sys
from PyQt5.QtWidgets import QApplication
from controllers.svg_controller import SvgController
from utils.config import SVG_DIR


def main() -> None:
    """
    Initializes and launches the SVG grid viewer.
    An optional first argument selects the directory to list.
    """
    app = QApplication(sys.argv)
    directory = sys.argv[1] if len(sys.argv) > 1 else SVG_DIR

    # The controller builds the UI and starts the application logic
    try:
        controller = SvgController(directory)
    except Exception as e:
        print(f"[ERROR] An unexpected error occurred: {e}")
        sys.exit(1)

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
