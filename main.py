import flet as ft
import logging
import os
from config.settings import Config
from modules.users import UsersController, create_users_view
from utils.log import setup_logging

logger = logging.getLogger(__name__)

def main(page: ft.Page):
    logger.info("🔧 Configurando aplicación...")

    page.title = Config.APP_TITLE
    page.theme_mode = ft.ThemeMode.LIGHT
    # Contenedor a sangre completa: la vista ocupa toda la página
    page.padding = 0
    page.spacing = 0

    if os.getenv("FLET_MODE") != "web":
        page.window.width = Config.WINDOW_WIDTH
        page.window.height = Config.WINDOW_HEIGHT

    controller = UsersController()

    def on_disconnect(e):
        controller.close()

    page.on_disconnect = on_disconnect

    page.add(create_users_view(page, controller))
    logger.info("✅ Aplicación lista")


if __name__ == "__main__":
    setup_logging(Config.LOG_LEVEL)
    # Detectar modo (web vs desktop)
    IS_WEB = os.getenv("FLET_MODE") == "web"

    if IS_WEB:
        logger.info("🌐 Iniciando en modo web...")
        ft.app(target=main, view=ft.AppView.WEB_BROWSER, port=8080, host="0.0.0.0")
    else:
        logger.info("🔧 Iniciando aplicación de escritorio...")
        ft.app(target=main, view=ft.AppView.FLET_APP)
