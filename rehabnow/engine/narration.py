"""Spanish text the kiosk shows and speaks.

All builders are pure: they only phrase data the engine has already resolved.
"""

from typing import Optional

from rehabnow.models.activity import DayContext
from rehabnow.models.recognition import RecognitionStatus

DEFAULT_PATIENT_NAME = "Usuario"
UNASSIGNED_ROOM_LABEL = "Sin asignar"
REST_DAY_LABEL = "Día de descanso"

_RECOGNIZED_CLOSING = (
    "En la pantalla puede ver toda su información del día, incluyendo horarios y salas asignadas. "
    "Para consultar otra vez o tomar una nueva foto, toque el botón 'Comenzar de Nuevo'."
)

HELP_INSTRUCTIONS = {
    RecognitionStatus.USER_NOT_FOUND: (
        "No hemos podido encontrar su información en nuestro sistema de pacientes. "
        "Por favor, consulte con el personal del centro de rehabilitación para verificar su registro. "
        "Puede intentar tomar otra foto tocando el botón 'Comenzar de Nuevo'."
    ),
    RecognitionStatus.NO_FACE_DETECTED: (
        "No hemos podido detectar claramente un rostro en la imagen. "
        "Por favor, asegúrese de estar bien posicionado frente a la cámara, que haya suficiente luz "
        "en el ambiente, y que no haya obstáculos tapando su cara. "
        "Toque 'Comenzar de Nuevo' para intentar otra vez."
    ),
    RecognitionStatus.ERROR: (
        "Ha ocurrido un error técnico. Por favor, verifique que la cámara funcione correctamente, "
        "que tenga una buena conexión a internet, y que el navegador tenga permisos para usar la cámara. "
        "Toque 'Comenzar de Nuevo' para intentar otra vez."
    ),
}

DEFAULT_MESSAGES = {
    RecognitionStatus.USER_FOUND: "Usuario reconocido",
    RecognitionStatus.USER_NOT_FOUND: "Usuario no encontrado",
    RecognitionStatus.NO_FACE_DETECTED: "No se detectó ningún rostro",
    RecognitionStatus.ERROR: "Error desconocido en el reconocimiento",
}


def recognition_message(name: Optional[str], context: Optional[DayContext]) -> str:
    """Spoken greeting after a successful recognition."""
    message = f"Excelente {name or DEFAULT_PATIENT_NAME}, le hemos reconocido correctamente. "

    if context is not None and context.current_activity is not None:
        activity = context.current_activity
        message += f"Su actividad actual es: {activity.description} a las {activity.time}. "
    elif context is not None and context.next_activity is not None:
        activity = context.next_activity
        message += f"Su próxima actividad es: {activity.description} a las {activity.time}. "

    return message + _RECOGNIZED_CLOSING


def help_instructions(status: RecognitionStatus) -> str:
    """Spoken instructions for a non-successful recognition outcome."""
    return HELP_INSTRUCTIONS.get(RecognitionStatus(status), HELP_INSTRUCTIONS[RecognitionStatus.ERROR])


def headline(context: Optional[DayContext], patient_id: Optional[str], day: Optional[str]) -> str:
    """Line under the greeting: the target activity, or the patient id and day."""
    target = None
    if context is not None:
        target = context.current_activity or context.next_activity
    if target is not None:
        return f"Tu próxima actividad: {target.activity_name} - {target.time}"
    return f"Paciente ID: {patient_id or ''} • Hoy es {day or ''}"


def room_label(room: Optional[str]) -> str:
    """Room name with its first letter capitalized, or the unassigned label."""
    if not room:
        return UNASSIGNED_ROOM_LABEL
    return room[0].upper() + room[1:]
