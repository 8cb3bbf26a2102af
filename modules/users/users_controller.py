"""Controlador de la pantalla de registros (usuarios con nombre + avatar).

Responsabilidades:
 - Listar registros y filtrarlos en memoria por nombre.
 - Crear, editar y eliminar registros contra la API mock.
 - Llevar el estado del formulario: cerrado, creando o editando.

Tras cada alta, edición o baja exitosa se vuelve a pedir la lista completa
al servidor; la copia local nunca se parchea.
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import httpx

from api.connection import get_client
from api.crud import RecordsApiError, create_record, delete_record, list_records, update_record
from api.models import Record

logger = logging.getLogger(__name__)

VALIDATION_TITLE = "Error"
VALIDATION_MESSAGE = "Please provide both name and avatar URL."


class UserService:
    """Acceso a la API de registros a través de un único cliente HTTP."""

    def __init__(self, client: httpx.Client | None = None):
        self.client = client or get_client()

    def close(self):
        self.client.close()

    def list_records(self) -> List[Record]:
        return list_records(self.client)

    def create_record(self, name: str, avatar: str) -> None:
        create_record(self.client, name, avatar)

    def update_record(self, record_id: str, name: str, avatar: str) -> None:
        update_record(self.client, record_id, name, avatar)

    def delete_record(self, record_id: str) -> None:
        delete_record(self.client, record_id)


def filter_records(records: List[Record], query: str) -> List[Record]:
    """Subconjunto cuyo nombre contiene `query` sin distinguir mayúsculas.
    Devuelve siempre una lista nueva; `records` no se toca."""
    if not query:
        return list(records)
    q = query.lower()
    return [r for r in records if q in r.name.lower()]


def validate_record_form(name: str, avatar: str) -> List[str]:
    problems = []
    if not name:
        problems.append("Name is required")
    if not avatar:
        problems.append("Avatar URL is required")
    return problems


# ---- Estado del formulario ----
@dataclass(frozen=True)
class Closed:
    pass

@dataclass(frozen=True)
class Creating:
    pass

@dataclass(frozen=True)
class Editing:
    target_id: str

FormState = Closed | Creating | Editing
CLOSED = Closed()


@dataclass
class ViewState:
    records: List[Record] = field(default_factory=list)
    filtered: List[Record] = field(default_factory=list)
    loading: bool = True
    search: str = ""
    form: FormState = CLOSED
    name: str = ""
    avatar: str = ""
    pending_delete: Optional[str] = None
    busy: bool = False

    @property
    def modal_open(self) -> bool:
        return not isinstance(self.form, Closed)

    @property
    def edit_target(self) -> Optional[str]:
        return self.form.target_id if isinstance(self.form, Editing) else None

    @property
    def submit_label(self) -> str:
        return "Update User" if isinstance(self.form, Editing) else "Add User"


class UsersController:
    """Orquesta la pantalla: la vista sólo llama a estos métodos y pinta `state`.

    Flet ejecuta los manejadores síncronos en hilos de trabajo, por eso los
    cambios de estado van bajo `_lock`. Los listeners se invocan fuera del lock.
    """

    def __init__(
        self,
        service: UserService | None = None,
        on_change: Callable[[ViewState], None] | None = None,
        on_alert: Callable[[str, str], None] | None = None,
    ):
        self.svc = service or UserService()
        self.state = ViewState()
        self.on_change = on_change
        self.on_alert = on_alert
        self._lock = threading.RLock()
        self._fetch_gen = 0

    def _notify(self):
        if self.on_change:
            self.on_change(self.state)

    def close(self):
        self.svc.close()

    # ---- Listado ----
    def mount(self) -> bool:
        return self.refresh()

    def refresh(self) -> bool:
        """Pide la lista completa. Si falla, la lista mostrada queda como estaba."""
        with self._lock:
            self._fetch_gen += 1
            gen = self._fetch_gen
            self.state.loading = True
        self._notify()

        records: Optional[List[Record]] = None
        try:
            records = self.svc.list_records()
        except RecordsApiError as exc:
            logger.error("Error fetching records: %s", exc)

        with self._lock:
            if gen != self._fetch_gen:
                # Hay un listado más reciente en curso; esta respuesta ya no vale
                logger.debug("Descartando listado obsoleto #%s (actual #%s)", gen, self._fetch_gen)
                return False
            if records is not None:
                self.state.records = records
                self.state.filtered = filter_records(records, self.state.search)
            self.state.loading = False
        self._notify()
        return records is not None

    def search(self, text: str):
        with self._lock:
            self.state.search = text or ""
            self.state.filtered = filter_records(self.state.records, self.state.search)
        self._notify()

    # ---- Formulario ----
    def open_create(self):
        with self._lock:
            self.state.form = Creating()
            self.state.name = ""
            self.state.avatar = ""
        self._notify()

    def open_edit(self, record: Record):
        with self._lock:
            self.state.form = Editing(record.id)
            self.state.name = record.name
            self.state.avatar = record.avatar
        self._notify()

    def set_name(self, value: str):
        with self._lock:
            self.state.name = value or ""

    def set_avatar(self, value: str):
        with self._lock:
            self.state.avatar = value or ""

    def cancel(self):
        with self._lock:
            if not self.state.modal_open:
                return
            self.state.form = CLOSED
            self.state.name = ""
            self.state.avatar = ""
        self._notify()

    def submit(self) -> bool:
        with self._lock:
            form = self.state.form
            if isinstance(form, Closed):
                logger.warning("submit sin formulario abierto; se ignora")
                return False
            if self.state.busy:
                logger.warning("submit ignorado: ya hay una operación en curso")
                return False
            name = self.state.name
            avatar = self.state.avatar
            problems = validate_record_form(name, avatar)
            if not problems:
                self.state.busy = True

        if problems:
            logger.info("Formulario inválido: %s", " | ".join(problems))
            if self.on_alert:
                self.on_alert(VALIDATION_TITLE, VALIDATION_MESSAGE)
            return False

        self._notify()
        try:
            if isinstance(form, Editing):
                self.svc.update_record(form.target_id, name, avatar)
            else:
                self.svc.create_record(name, avatar)
        except RecordsApiError as exc:
            logger.error("Error adding/updating record: %s", exc)
            with self._lock:
                self.state.busy = False
            self._notify()
            return False

        with self._lock:
            self.state.name = ""
            self.state.avatar = ""
            self.state.form = CLOSED
            self.state.busy = False
        self._notify()
        self.refresh()
        return True

    # ---- Eliminación (con confirmación) ----
    def request_delete(self, record_id: str):
        with self._lock:
            self.state.pending_delete = record_id
        self._notify()

    def cancel_delete(self):
        with self._lock:
            if self.state.pending_delete is None:
                return
            self.state.pending_delete = None
        self._notify()

    def confirm_delete(self) -> bool:
        with self._lock:
            record_id = self.state.pending_delete
            if record_id is None:
                return False
            if self.state.busy:
                logger.warning("delete ignorado: ya hay una operación en curso")
                return False
            self.state.pending_delete = None
            self.state.busy = True
        self._notify()

        try:
            self.svc.delete_record(record_id)
        except RecordsApiError as exc:
            logger.error("Error deleting record %s: %s", record_id, exc)
            with self._lock:
                self.state.busy = False
            self._notify()
            return False

        with self._lock:
            self.state.busy = False
        self._notify()
        self.refresh()
        return True
