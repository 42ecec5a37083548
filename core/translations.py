# core/translations.py

# static string tables, eu is the default language
# both tables must carry the same keys

TRANSLATIONS: dict[str, dict] = {
    "eu": {
        "app": {
            "language_name": "Euskara",
            "toggle_language": "Hizkuntza aldatu (Castellano)",
            "status_connected": "Hodeia",
            "status_mock": "Tokikoa",
        },
        "common": {
            "exit": "Irten",
            "back": "Itzuli",
            "select_option": "Aukeratu aukera bat:",
            "select_or_cancel": "Aukeratu aukera bat (0 uzteko):",
            "invalid_selection": "Aukera okerra. Saiatu berriro.",
            "blank_to_cancel": "(utzi hutsik bertan behera uzteko)",
            "blank_to_skip": "(utzi hutsik saltatzeko)",
            "confirm": "Ziur zaude?",
            "cancelled": "Aldaketarik gabe itzultzen.",
            "empty": "Ez dago elementurik.",
            "saved": "Gordeta.",
        },
        "sidebar": {
            "dashboard": "Arbela",
            "students": "Ikasleak",
            "classes": "Gelak",
            "notes": "Oharrak",
            "resources": "Baliabideak",
            "calendar": "Egutegia",
            "settings": "Ezarpenak",
            "dev_mode": "Garapen Modua",
            "session": "Saioa aktibo honela:",
        },
        "dashboard": {
            "hello": "Kaixo, Irakasle",
            "summary": "Hemen duzu gaurko laburpena.",
            "stats": {
                "students": "Ikasleak Guztira",
                "pending": "Esku-hartzeak Egiteke",
                "notes": "Ohar Aktiboak",
            },
            "pending_title": "Ebazteko zain",
            "view_students": "Ikasleak ikusi",
            "all_clear": "Dena egunean!",
            "quick_actions": {
                "title": "Ekintza Azkarrak",
                "desc": "Kudeatu zure egunerokoa eraginkortasunez.",
                "new_intervention": "Esku-hartze Berria",
                "create_note": "Oharra Sortu",
            },
        },
        "students": {
            "title": "Ikasleak",
            "search_placeholder": "Bilatu izena edo taldea...",
            "new_student": "Ikasle Berria",
            "edit_student": "Ikaslea Editatu",
            "delete_student": "Ikaslea Ezabatu",
            "back": "Zerrendara itzuli",
            "history": "Esku-hartzeen Historia",
            "grades": "Kalifikazioak",
            "no_records": "Oraindik ez dago erregistrorik.",
            "select_prompt": "Aukeratu ikasle bat bere fitxa ikusteko",
            "add_intervention": "Esku-hartze Berria",
            "toggle_status": "Esku-hartzearen egoera aldatu",
            "add_grade": "Nota Gehitu",
            "edit_grade": "Nota Editatu",
            "delete_grade": "Nota Ezabatu",
            "add_follow_up": "Sarrera Berria",
            "delete_follow_up": "Sarrera Ezabatu",
            "average": "Batez bestekoa",
            "tabs": {
                "interventions": "Esku-hartzeak",
                "grades": "Notak",
                "followup": "Jarraipena",
            },
            "forms": {
                "first_name": "Izena",
                "last_name": "Abizenak",
                "group": "Gelak aukeratu",
                "contact": "Gurasoen Emaila/Tel",
                "tags": "Behar Bereziak",
                "add_tag": "Beste bat gehitu...",
                "save_student": "Ikaslea Gorde",
                "update_student": "Aldaketak Gorde",
                "type": "Mota",
                "description": "Deskribapena",
                "desc_placeholder": "Gorabeheraren xehetasunak...",
                "save_record": "Erregistroa Gorde",
                "exam_title": "Azterketa / Lana",
                "grade_value": "Nota (0-10)",
                "grade_type": "Mota (Azterketa, Lana...)",
                "follow_up_title": "Izenburua (Bilera, Txostena...)",
                "follow_up_content": "Idatzi hemen edukia...",
            },
            "special_needs_options": {
                "adhd": "TDAH",
                "dyslexia": "Dislexia",
                "asd": "TEA",
                "high_abilities": "Gaitasun Handiak",
                "reinforcement": "Errefortzua",
                "language": "Hizkuntza",
                "hearing": "Entzumena",
                "visual": "Ikusmena",
            },
            "status": {
                "pending": "Egiteke",
                "resolved": "Ebaztuta",
                "mark_resolved": "Ebaztuta bezala markatu",
                "mark_pending": "Egiteke bezala markatu",
            },
            "types": {
                "behavior": "Jarrera",
                "academic": "Akademikoa",
                "family": "Familia",
                "positive": "Positiboa",
            },
            "grade_types": {
                "exam": "Azterketa",
                "work": "Lana",
                "final": "Azken Ebaluazioa",
            },
        },
        "classes": {
            "title": "Nire Gelak",
            "add_class": "Gela Sortu",
            "delete_class": "Gela Ezabatu",
            "no_classes": "Ez duzu gelarik sortu oraindik.",
            "students_in_class": "Gela honetako ikasleak",
            "add_student_to_class": "Gehitu ikaslea gela honetara",
            "enroll_existing": "Lehendik dagoen ikaslea gehitu",
            "average": "Gelaren batez bestekoa",
            "no_average": "Notarik gabe",
            "forms": {
                "name": "Gela Izena (adib: 3. DBH B)",
                "subject": "Ikasgaia",
                "save": "Gela Gorde",
            },
        },
        "notes": {
            "title": "Ohar Azkarrak",
            "new_note": "Ohar Berria",
            "placeholder": "Idatzi zure oharra hemen...",
            "archive": "Artxibatu",
            "color": "Kolorea",
            "save": "Gorde",
        },
        "resources": {
            "title": "Baliabide Liburutegia",
            "search_placeholder": "Bilatu baliabideak...",
            "add": "Gehitu",
            "toggle_favorite": "Gogokoa markatu/kendu",
            "delete": "Ezabatu",
            "table": {
                "resource": "Baliabidea",
                "tags": "Etiketak",
                "action": "Ekintza",
            },
            "no_resources": "Ez da baliabiderik aurkitu.",
            "forms": {
                "title": "Izenburua",
                "url": "URL (https://...)",
                "tags": "Etiketak (pdf, azterketa...)",
                "category": "Kategoria",
                "save": "Gorde",
            },
        },
        "calendar": {
            "title": "Eskola Egutegia",
            "drag_instruction": "Arrastatu ohar bat egun batera ekitaldi bihurtzeko.",
            "unscheduled_notes": "Planifikatu gabeko Oharrak",
            "schedule_note": "Oharra egun batera eraman",
            "new_event": "Ekitaldi Berria",
            "today_events": "Gaurko Ekitaldiak",
            "day_details": "Eguneko xehetasunak",
            "no_events": "Ez dago ekitaldirik egun honetarako.",
            "prev_month": "Aurreko hilabetea",
            "next_month": "Hurrengo hilabetea",
            "today": "Gaur",
            "day": "Eguna (1-31)",
            "date": "Data (UUUU-HH-EE)",
            "delete_title": "Ekitaldia ezabatu?",
            "delete_warning": "Ekintza hau ezin da desegin. Ekitaldia behin betiko ezabatuko da.",
            "types": {
                "general": "Orokorra",
                "exam": "Azterketa",
                "meeting": "Bilera",
            },
            "add": "Gehitu",
            "time": "Ordua",
            "actions": {
                "move": "Mugitu data",
                "delete": "Ezabatu",
                "save": "Gorde",
                "cancel": "Utzi",
            },
            "day_names": ["Al", "Ar", "Az", "Og", "Or", "Lr", "Ig"],
            "month_names": [
                "Urtarrila",
                "Otsaila",
                "Martxoa",
                "Apirila",
                "Maiatza",
                "Ekaina",
                "Uztaila",
                "Abuztua",
                "Iraila",
                "Urria",
                "Azaroa",
                "Abendua",
            ],
        },
        "settings": {
            "title": "Datu-basearen Konfigurazioa",
            "subtitle": "Konektatu zure datu-base erreala gailu arteko sinkronizaziorako.",
            "status": {
                "label": "Egoera:",
                "connected": "Konektatuta (MongoDB)",
                "mock": "Simulazio Modua (Tokiko Datuak)",
            },
            "form": {
                "uri": "Konexio URIa",
                "database": "Datu-basea",
                "save": "Gorde eta Freskatu",
                "clear": "Garbitu Konfigurazioa",
            },
            "warning": "Aldaketak gordetzean datu-basera berriro konektatuko da.",
        },
    },
    "es": {
        "app": {
            "language_name": "Castellano",
            "toggle_language": "Cambiar idioma (Euskara)",
            "status_connected": "Nube",
            "status_mock": "Local",
        },
        "common": {
            "exit": "Salir",
            "back": "Volver",
            "select_option": "Selecciona una opción:",
            "select_or_cancel": "Selecciona una opción (0 para cancelar):",
            "invalid_selection": "Selección no válida. Inténtalo de nuevo.",
            "blank_to_cancel": "(déjalo en blanco para cancelar)",
            "blank_to_skip": "(déjalo en blanco para omitir)",
            "confirm": "¿Estás seguro?",
            "cancelled": "Volviendo sin cambios.",
            "empty": "No hay elementos.",
            "saved": "Guardado.",
        },
        "sidebar": {
            "dashboard": "Dashboard",
            "students": "Mis Alumnos",
            "classes": "Clases",
            "notes": "Notas",
            "resources": "Recursos",
            "calendar": "Calendario",
            "settings": "Configuración",
            "dev_mode": "Modo Dev",
            "session": "Sesión activa como:",
        },
        "dashboard": {
            "hello": "Hola, Profesor",
            "summary": "Aquí tienes el resumen de hoy.",
            "stats": {
                "students": "Total Alumnos",
                "pending": "Intervenciones Pendientes",
                "notes": "Notas Activas",
            },
            "pending_title": "Pendientes de resolver",
            "view_students": "Ver alumnos",
            "all_clear": "¡Todo al día!",
            "quick_actions": {
                "title": "Acciones Rápidas",
                "desc": "Gestiona tu día a día de forma eficiente.",
                "new_intervention": "Nueva Intervención",
                "create_note": "Crear Nota",
            },
        },
        "students": {
            "title": "Alumnos",
            "search_placeholder": "Buscar por nombre o grupo...",
            "new_student": "Nuevo Alumno",
            "edit_student": "Editar Alumno",
            "delete_student": "Eliminar Alumno",
            "back": "Volver a lista",
            "history": "Historial de Intervenciones",
            "grades": "Calificaciones",
            "no_records": "No hay registros aún.",
            "select_prompt": "Selecciona un alumno para ver su ficha",
            "add_intervention": "Nueva Intervención",
            "toggle_status": "Cambiar estado de intervención",
            "add_grade": "Añadir Nota",
            "edit_grade": "Editar Nota",
            "delete_grade": "Eliminar Nota",
            "add_follow_up": "Nueva Entrada",
            "delete_follow_up": "Eliminar Entrada",
            "average": "Media",
            "tabs": {
                "interventions": "Intervenciones",
                "grades": "Notas",
                "followup": "Seguimiento",
            },
            "forms": {
                "first_name": "Nombre",
                "last_name": "Apellidos",
                "group": "Selección de Clases",
                "contact": "Email/Teléfono padres",
                "tags": "Necesidades Especiales",
                "add_tag": "Añadir otra...",
                "save_student": "Guardar Alumno",
                "update_student": "Actualizar Alumno",
                "type": "Tipo",
                "description": "Descripción",
                "desc_placeholder": "Detalles de la incidencia...",
                "save_record": "Guardar Registro",
                "exam_title": "Examen / Trabajo",
                "grade_value": "Nota (0-10)",
                "grade_type": "Tipo (Examen, Trabajo...)",
                "follow_up_title": "Título (Reunión, Informe...)",
                "follow_up_content": "Escribe aquí el contenido...",
            },
            "special_needs_options": {
                "adhd": "TDAH",
                "dyslexia": "Dislexia",
                "asd": "TEA",
                "high_abilities": "Altas Capacidades",
                "reinforcement": "Refuerzo",
                "language": "Lenguaje",
                "hearing": "Auditiva",
                "visual": "Visual",
            },
            "status": {
                "pending": "Pendiente",
                "resolved": "Resuelto",
                "mark_resolved": "Marcar como Resuelto",
                "mark_pending": "Marcar como Pendiente",
            },
            "types": {
                "behavior": "Conducta",
                "academic": "Académico",
                "family": "Familia",
                "positive": "Positivo",
            },
            "grade_types": {
                "exam": "Examen",
                "work": "Trabajo",
                "final": "Evaluación Final",
            },
        },
        "classes": {
            "title": "Mis Clases",
            "add_class": "Crear Clase",
            "delete_class": "Eliminar Clase",
            "no_classes": "No has creado ninguna clase todavía.",
            "students_in_class": "Alumnos en esta clase",
            "add_student_to_class": "Añadir alumno a esta clase",
            "enroll_existing": "Añadir alumno existente",
            "average": "Media de la clase",
            "no_average": "Sin notas",
            "forms": {
                "name": "Nombre Clase (ej: 3º ESO B)",
                "subject": "Asignatura",
                "save": "Guardar Clase",
            },
        },
        "notes": {
            "title": "Notas Rápidas",
            "new_note": "Nueva Nota",
            "placeholder": "Escribe tu nota aquí...",
            "archive": "Archivar",
            "color": "Color",
            "save": "Guardar",
        },
        "resources": {
            "title": "Biblioteca de Recursos",
            "search_placeholder": "Buscar recursos...",
            "add": "Añadir",
            "toggle_favorite": "Marcar/quitar favorito",
            "delete": "Eliminar",
            "table": {
                "resource": "Recurso",
                "tags": "Tags",
                "action": "Acción",
            },
            "no_resources": "No se encontraron recursos.",
            "forms": {
                "title": "Título",
                "url": "URL (https://...)",
                "tags": "Tags (pdf, examen...)",
                "category": "Categoría",
                "save": "Guardar",
            },
        },
        "calendar": {
            "title": "Calendario Escolar",
            "drag_instruction": "Arrastra una nota a un día para convertirla en evento.",
            "unscheduled_notes": "Notas sin planificar",
            "schedule_note": "Llevar una nota a un día",
            "new_event": "Nuevo Evento",
            "today_events": "Eventos del día",
            "day_details": "Detalles del día",
            "no_events": "No hay eventos para este día.",
            "prev_month": "Mes anterior",
            "next_month": "Mes siguiente",
            "today": "Hoy",
            "day": "Día (1-31)",
            "date": "Fecha (AAAA-MM-DD)",
            "delete_title": "¿Eliminar evento?",
            "delete_warning": "Esta acción no se puede deshacer. El evento se eliminará permanentemente.",
            "types": {
                "general": "General",
                "exam": "Examen",
                "meeting": "Reunión",
            },
            "add": "Añadir",
            "time": "Hora",
            "actions": {
                "move": "Mover fecha",
                "delete": "Eliminar",
                "save": "Guardar",
                "cancel": "Cancelar",
            },
            "day_names": ["Lun", "Mar", "Mié", "Jue", "Vie", "Sáb", "Dom"],
            "month_names": [
                "Enero",
                "Febrero",
                "Marzo",
                "Abril",
                "Mayo",
                "Junio",
                "Julio",
                "Agosto",
                "Septiembre",
                "Octubre",
                "Noviembre",
                "Diciembre",
            ],
        },
        "settings": {
            "title": "Configuración de la Base de Datos",
            "subtitle": "Conecta tu base de datos real para sincronización entre dispositivos.",
            "status": {
                "label": "Estado:",
                "connected": "Conectado (MongoDB)",
                "mock": "Modo Simulación (Datos Locales)",
            },
            "form": {
                "uri": "URI de conexión",
                "database": "Base de datos",
                "save": "Guardar y Recargar",
                "clear": "Borrar Configuración",
            },
            "warning": "Al guardar los cambios se volverá a conectar con la base de datos.",
        },
    },
}
