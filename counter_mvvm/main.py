import sys
from PySide6.QtWidgets import QApplication
from loguru import logger

from counter_mvvm.core.config import ConfigManager
from counter_mvvm.core.logging import setup_logging
from counter_mvvm.model.counter import Counter
from counter_mvvm.ui.viewmodels.counter_presenter import CounterPresenter
from counter_mvvm.ui.views.counter_view import CounterWindow


def main(config_path: str = "config.json") -> int:
    # 1. Configuration and logging
    config = ConfigManager(config_path)
    general = config.data.general
    setup_logging(general.debug_mode, general.log_dir, general.log_to_file)

    # 2. Qt application
    app = QApplication.instance() or QApplication(sys.argv)

    # 3. Model -> ViewModel -> View
    settings = config.data.counter
    counter = Counter(settings.initial_value, settings.min_value, settings.max_value)
    presenter = CounterPresenter(counter)

    window = CounterWindow(presenter, config.data.window)
    window.show()
    logger.info(f"Counter started with {counter!r}")

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
