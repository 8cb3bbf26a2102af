"""Vista Flet de la pantalla de registros.

Incluye:
 - Indicador de carga
 - Búsqueda local por nombre
 - Lista de tarjetas (avatar + nombre + Editar / Eliminar)
 - Botón flotante para crear y diálogo modal del formulario
 - Confirmación de eliminación
"""
import flet as ft

from api.models import Record
from config.settings import Config
from .users_controller import UsersController, ViewState

# Paleta de la pantalla
BG_COLOR     = "#00BFFF"  # deepskyblue
CARD_BG      = ft.Colors.WHITE
TEXT_COLOR   = "#333333"
ACCENT_COLOR = "#007BFF"
DANGER_COLOR = "#DC3545"
SPINNER_COLOR = "#0000FF"


def create_users_view(page: ft.Page, controller: UsersController | None = None) -> ft.Control:
    ctrl = controller or UsersController()

    list_ref = ft.Ref[ft.ListView]()
    root_ref = ft.Ref[ft.Container]()

    # Qué diálogo está abierto ahora mismo, para no reabrirlo en cada repintado
    shown = {"form": None, "delete": None}

    def record_card(r: Record) -> ft.Control:
        return ft.Container(
            bgcolor=CARD_BG,
            border_radius=10,
            padding=16,
            shadow=ft.BoxShadow(blur_radius=6, color="#1A000000", offset=ft.Offset(0, 2)),
            content=ft.Row([
                ft.Image(
                    src=r.avatar,
                    width=50,
                    height=50,
                    border_radius=25,
                    fit=ft.ImageFit.COVER,
                    error_content=ft.Icon(ft.Icons.PERSON, size=40, color=ft.Colors.BLUE_GREY_300),
                ),
                ft.Text(r.name, size=18, weight=ft.FontWeight.BOLD, color=TEXT_COLOR, expand=True),
                ft.Row([
                    ft.FilledButton("Edit", on_click=(lambda e, rec=r: ctrl.open_edit(rec)), style=ft.ButtonStyle(bgcolor=ft.Colors.GREEN, color=ft.Colors.WHITE, shape=ft.RoundedRectangleBorder(radius=8))),
                    ft.FilledButton("Delete", on_click=(lambda e, rid=r.id: ctrl.request_delete(rid)), style=ft.ButtonStyle(bgcolor=DANGER_COLOR, color=ft.Colors.WHITE, shape=ft.RoundedRectangleBorder(radius=8))),
                ], spacing=8),
            ], spacing=16),
            key=r.id,
        )

    # ---- Formulario (crear / editar) ----
    tf_name = ft.TextField(label="Name", on_change=lambda e: ctrl.set_name(e.control.value), bgcolor="#F9F9F9", border_radius=8)
    tf_avatar = ft.TextField(label="Avatar URL", on_change=lambda e: ctrl.set_avatar(e.control.value), bgcolor="#F9F9F9", border_radius=8)
    btn_submit = ft.FilledButton("Add User", on_click=lambda e: ctrl.submit(), style=ft.ButtonStyle(bgcolor=ACCENT_COLOR, color=ft.Colors.WHITE, shape=ft.RoundedRectangleBorder(radius=8)))

    def _dismiss_form(_):
        # Cerrar con "atrás" o tocando fuera equivale a Cancelar
        if ctrl.state.modal_open:
            ctrl.cancel()

    form_dlg = ft.AlertDialog(
        content=ft.Container(
            content=ft.Column([tf_name, tf_avatar], tight=True, spacing=12),
            width=360,
        ),
        actions=[
            btn_submit,
            ft.TextButton("Cancel", on_click=lambda e: ctrl.cancel(), style=ft.ButtonStyle(color=DANGER_COLOR)),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=10),
        on_dismiss=_dismiss_form,
    )

    # ---- Confirmación de borrado ----
    def _dismiss_delete(_):
        if ctrl.state.pending_delete is not None:
            ctrl.cancel_delete()

    delete_dlg = ft.AlertDialog(
        modal=True,
        title=ft.Text("Confirm Delete", weight=ft.FontWeight.BOLD),
        content=ft.Text("Are you sure you want to delete this user?"),
        actions=[
            ft.TextButton("Cancel", on_click=lambda e: ctrl.cancel_delete()),
            ft.FilledButton("Delete", icon=ft.Icons.DELETE_FOREVER, on_click=lambda e: ctrl.confirm_delete(), bgcolor=ft.Colors.RED_600, color=ft.Colors.WHITE),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=12),
        on_dismiss=_dismiss_delete,
    )

    # ---- Aviso de validación (un único diálogo reutilizado) ----
    alert_title = ft.Text("", weight=ft.FontWeight.BOLD)
    alert_text = ft.Text("")
    alert_dlg = ft.AlertDialog(
        modal=True,
        title=alert_title,
        content=alert_text,
        actions=[ft.TextButton("OK", on_click=lambda e: page.close(alert_dlg))],
        actions_alignment=ft.MainAxisAlignment.END,
    )

    def show_alert(title: str, message: str):
        alert_title.value = title
        alert_text.value = message
        page.open(alert_dlg)

    def _sync_form(state: ViewState):
        if state.modal_open and shown["form"] != state.form:
            tf_name.value = state.name
            tf_avatar.value = state.avatar
            if shown["form"] is None:
                page.open(form_dlg)
            shown["form"] = state.form
        elif not state.modal_open and shown["form"] is not None:
            shown["form"] = None
            page.close(form_dlg)
        btn_submit.text = state.submit_label
        btn_submit.disabled = state.busy

    def _sync_delete(state: ViewState):
        if state.pending_delete is not None and shown["delete"] is None:
            shown["delete"] = state.pending_delete
            page.open(delete_dlg)
        elif state.pending_delete is None and shown["delete"] is not None:
            shown["delete"] = None
            page.close(delete_dlg)

    def render(state: ViewState):
        if root_ref.current:
            root_ref.current.content = spinner if state.loading else body
        if list_ref.current is not None:
            list_ref.current.controls = [record_card(r) for r in state.filtered]
        _sync_form(state)
        _sync_delete(state)
        page.update()

    ctrl.on_change = render
    ctrl.on_alert = show_alert

    page.floating_action_button = ft.FloatingActionButton(
        content=ft.Text("+", size=32, weight=ft.FontWeight.BOLD, color=ft.Colors.WHITE),
        bgcolor=ACCENT_COLOR,
        shape=ft.CircleBorder(),
        on_click=lambda e: ctrl.open_create(),
    )

    spinner = ft.Container(
        content=ft.ProgressRing(color=SPINNER_COLOR),
        alignment=ft.alignment.center,
        expand=True,
    )

    body = ft.Column(
        controls=[
            ft.Text(Config.APP_TITLE, size=24, weight=ft.FontWeight.BOLD, color=ft.Colors.WHITE, text_align=ft.TextAlign.CENTER),
            ft.TextField(
                hint_text="Search Users",
                on_change=lambda e: ctrl.search(e.control.value),
                bgcolor=ft.Colors.WHITE,
                border_color="#CCCCCC",
                border_radius=8,
                text_style=ft.TextStyle(color=TEXT_COLOR, size=16),
            ),
            ft.ListView(ref=list_ref, expand=True, spacing=12),
        ],
        horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
        spacing=16,
        expand=True,
    )

    root = ft.Container(
        ref=root_ref,
        content=spinner,
        bgcolor=BG_COLOR,
        padding=16,
        expand=True,
    )

    # Primera carga en segundo plano para que el spinner se vea mientras tanto
    page.run_thread(ctrl.mount)
    return root
