"""
Default data seed.

Loads the baseline sales guidelines when the rule store is empty, and
three sample conversations with their guideline usage when there are
no sessions yet.

Dependencies: sqlalchemy, sales_agent.boundary.db
System role: Development/bootstrap data loading

Usage:
    python -m sales_agent.boundary.db.seed
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from sales_agent.boundary.db.connection import get_async_session_factory
from sales_agent.boundary.db.create_tables import create_all_tables
from sales_agent.boundary.db.CRUD.guideline_crud import guideline_crud
from sales_agent.boundary.db.CRUD.guideline_usage_crud import guideline_usage_crud
from sales_agent.boundary.db.CRUD.message_crud import message_crud
from sales_agent.boundary.db.CRUD.session_crud import session_crud
from sales_agent.boundary.db.models.guideline_model import GuidelineStrength
from sales_agent.boundary.db.models.message_model import MessageRole
from sales_agent.observability.logger import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_GUIDELINES: list[dict] = [
    {
        "title": "Precio",
        "content": "Si preguntan precio, no dar cifra y proponer reunión",
        "strength": GuidelineStrength.HARD,
        "priority": 10,
        "triggers": ["precio", "coste", "cuesta", "cuánto cuesta", "tarifa"],
    },
    {
        "title": "Tono",
        "content": "Usar un tono cercano y positivo",
        "strength": GuidelineStrength.SOFT,
        "priority": 7,
        "triggers": [],
    },
    {
        "title": "Contexto del Cliente",
        "content": "Siempre preguntar por el contexto del cliente antes de dar recomendaciones",
        "strength": GuidelineStrength.HARD,
        "priority": 9,
        "triggers": ["recomendación", "sugerencia", "consejo", "qué me recomiendas"],
    },
    {
        "title": "Jerga Técnica",
        "content": "Evitar usar jerga técnica sin explicar",
        "strength": GuidelineStrength.SOFT,
        "priority": 6,
        "triggers": ["técnico", "tecnología", "implementación", "api", "backend"],
    },
    {
        "title": "Confirmar Entendimiento",
        "content": "Confirmar entendimiento del cliente antes de proceder",
        "strength": GuidelineStrength.HARD,
        "priority": 8,
        "triggers": ["proceder", "continuar", "siguiente", "avanzar"],
    },
    {
        "title": "Personalización",
        "content": "Siempre enfatizar la personalización de la solución",
        "strength": GuidelineStrength.SOFT,
        "priority": 7,
        "triggers": ["solución", "servicio", "producto", "implementar"],
    },
    {
        "title": "Seguimiento",
        "content": "Proponer seguimiento y soporte continuo",
        "strength": GuidelineStrength.SOFT,
        "priority": 6,
        "triggers": ["después", "post-venta", "soporte", "mantenimiento"],
    },
    {
        "title": "Casos de Éxito",
        "content": "Mencionar casos de éxito relevantes cuando sea apropiado",
        "strength": GuidelineStrength.SOFT,
        "priority": 5,
        "triggers": ["ejemplos", "casos", "experiencia", "clientes"],
    },
    {
        "title": "Urgencia",
        "content": "Identificar y responder a señales de urgencia del cliente",
        "strength": GuidelineStrength.HARD,
        "priority": 9,
        "triggers": ["urgente", "rápido", "inmediato", "pronto"],
    },
    {
        "title": "Objeción de Precio",
        "content": "Cuando hay objeciones de precio, enfocarse en el valor y ROI",
        "strength": GuidelineStrength.HARD,
        "priority": 8,
        "triggers": ["caro", "costoso", "no puedo pagar", "presupuesto"],
    },
]


async def seed_guidelines(db: AsyncSession) -> int:
    """
    Insert DEFAULT_GUIDELINES unless the guideline table already has rows.

    Args:
        db: Async database session (committed on success)

    Returns:
        int: Number of guidelines created (0 when skipped)
    """
    existing = await guideline_crud.count(db)
    if existing > 0:
        logger.info(f"Database already contains {existing} guidelines. Skipping seed.")
        return 0

    for data in DEFAULT_GUIDELINES:
        await guideline_crud.create(db, active=True, single_use=False, **data)
        logger.info(f"Created guideline: {data['title']}")

    await db.commit()
    logger.info(f"Seeded {len(DEFAULT_GUIDELINES)} guidelines")
    return len(DEFAULT_GUIDELINES)


# Each turn: (user message, assistant reply, guideline titles applied to the reply)
SAMPLE_SESSIONS: list[list[tuple[str, str, list[str]]]] = [
    [
        (
            "Hola, me interesa saber más sobre sus servicios y qué me recomiendan para mi empresa",
            "¡Hola! Me alegra que te interesen nuestros servicios. Para poder darte la mejor "
            "recomendación personalizada, ¿podrías contarme un poco sobre tu empresa, el sector "
            "en el que operas y qué tipo de soluciones estás buscando? Esto me ayudará a entender "
            "mejor tus necesidades específicas.",
            ["Contexto del Cliente", "Personalización", "Tono"],
        ),
        (
            "Somos una empresa de tecnología que desarrolla software para el sector financiero. "
            "Tenemos unos 50 empleados y queremos mejorar nuestros procesos internos",
            "Perfecto, entiendo tu contexto. El sector financiero tiene requisitos muy específicos "
            "de seguridad y cumplimiento. Basándome en tu tamaño de empresa y sector, te "
            "recomendaría empezar con una solución de gestión de proyectos que incluya control de "
            "versiones y auditoría de cambios. ¿Te parece bien si continuamos explorando esta opción?",
            ["Personalización", "Casos de Éxito", "Confirmar Entendimiento"],
        ),
        (
            "Sí, suena bien. ¿Cuánto tiempo tomaría la implementación y cuál sería el costo aproximado?",
            "Para una empresa de tu tamaño, estimamos entre 6-8 semanas para la implementación "
            "completa. En cuanto al costo, prefiero no dar cifras aproximadas sin conocer todos los "
            "detalles de tu infraestructura actual. Te propongo agendar una reunión técnica donde "
            "podamos evaluar tu entorno y darte una propuesta personalizada. ¿Te parece bien "
            "programar una llamada para la próxima semana?",
            ["Precio", "Personalización", "Seguimiento"],
        ),
    ],
    [
        (
            "¿Cuál es el precio de implementación? Necesito algo urgente y tengo un presupuesto limitado",
            "Entiendo tu urgencia y tu preocupación por el presupuesto. Para poder darte una "
            "propuesta personalizada que se ajuste a tus necesidades y recursos, me gustaría agendar "
            "una reunión donde podamos revisar tus requerimientos específicos. Te aseguro que "
            "trabajaremos para encontrar la mejor solución dentro de tu presupuesto. ¿Podemos "
            "programar una llamada para mañana mismo?",
            ["Urgencia", "Objeción de Precio", "Personalización", "Seguimiento"],
        ),
        (
            "No puedo esperar tanto, necesito una respuesta hoy mismo. Mi presupuesto máximo es de 5000€",
            "Comprendo perfectamente tu urgencia. Con un presupuesto de 5000€, podemos ofrecerte una "
            "solución básica pero funcional que se implemente en 2-3 días. Sin embargo, para darte "
            "la mejor opción dentro de tu presupuesto y tiempo, necesito 30 minutos de tu tiempo hoy "
            "mismo. ¿Podemos hacer una llamada rápida en la próxima hora?",
            ["Urgencia", "Objeción de Precio", "Personalización", "Confirmar Entendimiento"],
        ),
        (
            "Perfecto, tengo tiempo ahora. ¿Pueden empezar hoy mismo?",
            "¡Excelente! Sí, podemos comenzar hoy mismo. Te voy a transferir con nuestro equipo "
            "técnico para que hagamos la evaluación inmediata y empecemos la implementación. "
            "Mientras tanto, ¿podrías preparar una lista de tus requisitos más críticos? Esto nos "
            "ayudará a optimizar el tiempo y asegurar que la solución se ajuste perfectamente a tu "
            "presupuesto de 5000€.",
            ["Urgencia", "Personalización", "Seguimiento", "Confirmar Entendimiento"],
        ),
    ],
    [
        (
            "¿Pueden implementar una API personalizada? Necesito algo técnico pero que sea fácil de usar",
            "¡Por supuesto! Podemos desarrollar una API completamente personalizada para ti. Para "
            "asegurarme de que la solución sea tanto técnica como fácil de usar, me gustaría entender "
            "mejor tu caso de uso específico. ¿Podrías contarme qué tipo de integración necesitas y "
            "con qué sistemas? Tenemos experiencia en crear APIs intuitivas que simplifican procesos "
            "complejos.",
            ["Jerga Técnica", "Personalización", "Contexto del Cliente"],
        ),
        (
            "Necesito integrar con Salesforce y un sistema de facturación personalizado. ¿Es muy complejo?",
            "No es complejo para nosotros, pero entiendo tu preocupación. Hemos implementado más de "
            "50 integraciones con Salesforce y sistemas de facturación. Te explico de manera simple: "
            "crearemos un \"puente\" que conecte ambos sistemas automáticamente. Los datos se "
            "sincronizarán en tiempo real sin que tengas que hacer nada manual. ¿Te parece bien si "
            "te muestro algunos ejemplos de integraciones similares que hemos hecho?",
            ["Jerga Técnica", "Casos de Éxito", "Personalización"],
        ),
        (
            "Sí, me gustaría ver ejemplos. ¿Cuánto tiempo tomaría y qué necesito proporcionarles?",
            "Perfecto. Te voy a enviar algunos casos de éxito relevantes por email. Para la "
            "implementación, necesitaríamos acceso a tu instancia de Salesforce (solo lectura) y la "
            "documentación de tu sistema de facturación. El desarrollo completo tomaría entre 4-6 "
            "semanas. Para darte una propuesta detallada y timeline preciso, ¿podemos agendar una "
            "reunión técnica donde revisemos tus sistemas actuales?",
            ["Casos de Éxito", "Personalización", "Seguimiento", "Confirmar Entendimiento"],
        ),
    ],
]


async def seed_sample_sessions(db: AsyncSession) -> int:
    """
    Insert SAMPLE_SESSIONS unless the session table already has rows.

    Usage rows are only written for guidelines present in the rule store,
    so run seed_guidelines first.

    Args:
        db: Async database session (committed on success)

    Returns:
        int: Number of sessions created (0 when skipped)
    """
    existing = await session_crud.count(db)
    if existing > 0:
        logger.info(f"Database already contains {existing} sessions. Skipping session seed.")
        return 0

    guideline_ids = {g.title: g.id for g in await guideline_crud.get_all(db)}

    for number, turns in enumerate(SAMPLE_SESSIONS, start=1):
        session = await session_crud.create(db)
        usage_count = 0
        for user_text, assistant_text, titles in turns:
            await message_crud.add_message(db, session.id, MessageRole.USER, user_text)
            reply = await message_crud.add_message(
                db, session.id, MessageRole.ASSISTANT, assistant_text
            )
            for title in titles:
                guideline_id = guideline_ids.get(title)
                if guideline_id is None:
                    logger.warning(f"Guideline '{title}' not found, usage not recorded")
                    continue
                await guideline_usage_crud.record(db, session.id, reply.id, guideline_id)
                usage_count += 1
        logger.info(
            f"Created session {number}: {len(turns) * 2} messages, {usage_count} guideline usages"
        )

    await db.commit()
    logger.info(f"Seeded {len(SAMPLE_SESSIONS)} sample sessions")
    return len(SAMPLE_SESSIONS)


async def main() -> None:
    """Create tables, then seed default guidelines and sample sessions."""
    await create_all_tables()
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as db:
        await seed_guidelines(db)
        await seed_sample_sessions(db)


if __name__ == "__main__":
    configure_logging()
    asyncio.run(main())
