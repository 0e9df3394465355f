import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import get_settings
from models import (
    AnalysisSpec,
    ChatPromptSpec,
    ClusterSpec,
    EvaluationSpec,
    FlashcardSpec,
    InsightsSpec,
    PromptResponse,
    QuickChatSpec,
    QuizSpec,
    RoutineSpec,
    TutorPromptRequest,
)
from services.generation import (
    build_analysis_prompt,
    build_cluster_prompt,
    build_evaluation_prompt,
    build_flashcard_prompt,
    build_insights_prompt,
    build_quiz_prompt,
    build_routine_prompt,
)
from services.rag import build_chat_prompt
from services.tutor import build_quick_chat_prompt, build_tutor_prompt

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Tutor Prompt API",
    description="Renders tutor, quiz, flashcard and grounded chat prompts for a downstream language model.",
    version="1.0.0",
)

# ── CORS ──────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Health ────────────────────────────────────────────────────────────────────
@app.get("/health")
async def health():
    return {"status": "ok"}


# ── Tutor ─────────────────────────────────────────────────────────────────────
@app.post("/prompts/tutor", response_model=PromptResponse)
async def tutor_prompt(data: TutorPromptRequest):
    """Render the system instruction for one tutoring turn in the given mode."""
    prompt = build_tutor_prompt(data.mode, data.options)
    logger.info("Built tutor prompt mode=%s chars=%d", data.mode.value, len(prompt))
    return PromptResponse(prompt=prompt)


# ── Quiz ──────────────────────────────────────────────────────────────────────
@app.post("/prompts/quiz", response_model=PromptResponse)
async def quiz_prompt(data: QuizSpec):
    """
    Render a quiz generation prompt. The model's JSON reply is validated by
    whoever calls the model, not here.
    """
    prompt = build_quiz_prompt(
        topic=data.topic,
        num_questions=data.num_questions,
        difficulty=data.difficulty,
        question_types=data.question_types,
        context=data.context,
    )
    logger.info("Built quiz prompt questions=%d chars=%d", data.num_questions, len(prompt))
    return PromptResponse(prompt=prompt)


# ── Flashcards ────────────────────────────────────────────────────────────────
@app.post("/prompts/flashcards", response_model=PromptResponse)
async def flashcard_prompt(data: FlashcardSpec):
    prompt = build_flashcard_prompt(data.topic, data.num_cards, data.context)
    logger.info("Built flashcard prompt cards=%d chars=%d", data.num_cards, len(prompt))
    return PromptResponse(prompt=prompt)


# ── Grounded chat ─────────────────────────────────────────────────────────────
@app.post("/prompts/chat", response_model=PromptResponse)
async def chat_prompt(data: ChatPromptSpec):
    """Render a chat prompt grounded in the retrieved passages supplied by the caller."""
    prompt = build_chat_prompt(
        query=data.query,
        level=data.level,
        mode=data.mode,
        passages=data.passages,
        history=data.history,
        system_prompt=data.system_prompt,
        history_window=get_settings().chat_history_window,
    )
    logger.info(
        "Built chat prompt passages=%d history=%d chars=%d",
        len(data.passages), len(data.history), len(prompt),
    )
    return PromptResponse(prompt=prompt)


# ── Answer evaluation ─────────────────────────────────────────────────────────
@app.post("/prompts/evaluate", response_model=PromptResponse)
async def evaluation_prompt(data: EvaluationSpec):
    prompt = build_evaluation_prompt(data.question, data.student_answer, data.correct_answer)
    logger.info("Built evaluation prompt chars=%d", len(prompt))
    return PromptResponse(prompt=prompt)


# ── Document analysis ─────────────────────────────────────────────────────────
@app.post("/prompts/analyze", response_model=PromptResponse)
async def analysis_prompt(data: AnalysisSpec):
    prompt = build_analysis_prompt(data.content, max_chars=get_settings().analysis_max_chars)
    logger.info("Built analysis prompt named_file=%s chars=%d", data.file_name is not None, len(prompt))
    return PromptResponse(prompt=prompt)


# ── Progress insights ─────────────────────────────────────────────────────────
@app.post("/prompts/insights", response_model=PromptResponse)
async def insights_prompt(data: InsightsSpec):
    prompt = build_insights_prompt(data.performance_data)
    logger.info("Built insights prompt chars=%d", len(prompt))
    return PromptResponse(prompt=prompt)


# ── Concept clustering ────────────────────────────────────────────────────────
@app.post("/prompts/clusters", response_model=PromptResponse)
async def cluster_prompt(data: ClusterSpec):
    prompt = build_cluster_prompt(data.concepts)
    logger.info("Built cluster prompt concepts=%d chars=%d", len(data.concepts), len(prompt))
    return PromptResponse(prompt=prompt)


# ── Daily routine ─────────────────────────────────────────────────────────────
@app.post("/prompts/routine", response_model=PromptResponse)
async def routine_prompt(data: RoutineSpec):
    """Render a daily-schedule prompt; the model answers in timed text blocks, not JSON."""
    prompt = build_routine_prompt(data.preferences, data.activities)
    logger.info("Built routine prompt activities=%d chars=%d", len(data.activities), len(prompt))
    return PromptResponse(prompt=prompt)


# ── Quick chat ────────────────────────────────────────────────────────────────
@app.post("/prompts/quick-chat", response_model=PromptResponse)
async def quick_chat_prompt(data: QuickChatSpec):
    """One-shot tutor prompt without retrieved passages."""
    prompt = build_quick_chat_prompt(data.message, data.mode, data.context)
    logger.info("Built quick chat prompt grounded=%s chars=%d", data.context is not None, len(prompt))
    return PromptResponse(prompt=prompt)
