"""Conversational turns: greeting, intent-specific reply body, suggestions."""

from notemind.core.analysis import ContentAnalyzer
from notemind.models import (
    GoalStatus,
    Intent,
    MentorContext,
    MentorMessage,
    MessageType,
)
from notemind.services.mentor.intents import (
    FOLLOW_UP_QUESTIONS,
    SUGGESTED_ACTIONS,
    determine_intent,
)
from notemind.utils.clock import Clock, SystemClock
from notemind.utils.fallback import FallbackReporter
from notemind.utils.id_generator import generate_message_id
from notemind.utils.logger import get_logger

logger = get_logger(__name__)

REPLY_CONFIDENCE = 0.95
MIN_MESSAGE_LENGTH = 3

SHORT_INPUT_ACTIONS = [
    "Review your latest note?",
    "Check in on your active goal?",
    "Get a quick learning tip?",
]
SHORT_INPUT_FOLLOW_UPS = ["What's on your mind?", "Need a nudge?"]

GENERIC_REPLY = (
    "Hey! I'm your AI mentor, here to help you learn and grow. 😊\n\n"
    "What would you like to work on today?"
)
GENERIC_ACTIONS = ["Ask about learning", "Organize notes", "Set a goal"]
GENERIC_FOLLOW_UPS = ["What's on your mind?", "Need study tips?", "Feeling stuck?"]


def greeting_for_hour(hour: int) -> str:
    if hour < 12:
        return "Good morning"
    if hour < 17:
        return "Good afternoon"
    return "Good evening"


class DialogueEngine:
    """
    Answers one chat message per call.

    Each turn is a pure function of (message, context, clock); the caller
    keeps the conversation history.
    """

    def __init__(
        self,
        analyzer: ContentAnalyzer | None = None,
        clock: Clock | None = None,
        reporter: FallbackReporter | None = None,
    ):
        self.reporter = reporter or FallbackReporter()
        self.analyzer = analyzer or ContentAnalyzer(reporter=self.reporter)
        self.clock = clock or SystemClock()

    def process_user_message(
        self, message: str | None, context: MentorContext | None = None
    ) -> MentorMessage:
        """
        Build the mentor's reply to a user message.

        Args:
            message: Raw user message (may be empty)
            context: Notes, goals, profile, streak and progress

        Returns:
            Mentor message; a generic reply if anything goes wrong
        """
        try:
            context = context or MentorContext()
            now = self.clock.now()
            text = message or ""
            intent = determine_intent(text)

            reply = self._greeting(now.hour, context)

            if len(text.strip()) < MIN_MESSAGE_LENGTH:
                reply += (
                    "No worries, you don't need a perfect question. "
                    "Even saying *\"I'm stuck\"* is enough. 💙\n\nHow about we..."
                )
                reply += "".join(f"\n{i}. {a}" for i, a in enumerate(SHORT_INPUT_ACTIONS, 1))
                return MentorMessage(
                    id=generate_message_id("resp", now),
                    text=reply,
                    type=MessageType.MENTOR,
                    timestamp=now,
                    suggested_actions=list(SHORT_INPUT_ACTIONS),
                    follow_up_questions=list(SHORT_INPUT_FOLLOW_UPS),
                    intent=intent,
                )

            reply += self._body(intent, text, context)
            logger.debug(f"Mentor reply for intent {intent.value}")

            return MentorMessage(
                id=generate_message_id("resp", now),
                text=reply,
                type=MessageType.MENTOR,
                timestamp=now,
                suggested_actions=list(SUGGESTED_ACTIONS[intent]),
                follow_up_questions=list(FOLLOW_UP_QUESTIONS[intent]),
                confidence=REPLY_CONFIDENCE,
                intent=intent,
            )

        except Exception as e:
            self.reporter.report("mentor.process_user_message", e)
            now = self.clock.now()
            return MentorMessage(
                id=generate_message_id("fallback", now),
                text=GENERIC_REPLY,
                type=MessageType.MENTOR,
                timestamp=now,
                suggested_actions=list(GENERIC_ACTIONS),
                follow_up_questions=list(GENERIC_FOLLOW_UPS),
            )

    @staticmethod
    def _greeting(hour: int, context: MentorContext) -> str:
        greeting = f"{greeting_for_hour(hour)}! 👋 "
        if context.streak > 3:
            greeting += f"You're on a {context.streak}-day streak, amazing consistency! "
        if context.progress.overall > 70:
            greeting += "You're really leveling up! "
        return greeting + "\n\n"

    def _body(self, intent: Intent, message: str, context: MentorContext) -> str:
        if intent == Intent.LEARNING_METHOD:
            return self._learning_method(context)
        if intent == Intent.GOAL_ACHIEVEMENT:
            return self._goal_achievement(context)
        if intent == Intent.PROBLEM_SOLVING:
            return (
                "Feeling stuck? That's your brain growing. 💪\n\n"
                "Try this:\n→ Write the problem in **7 words or fewer**.\n"
                "→ Ask: *\"What's the smallest piece I can solve right now?\"*\n\n"
                "You've untangled tough things before, this is just one more."
            )
        if intent == Intent.NOTE_ORGANIZATION:
            body = "Your notes are your second brain, let's keep them tidy! ✨\n\n"
            if len(context.notes) > 10:
                return body + (
                    "• **Archive or delete** anything older than 30 days you haven't revisited\n"
                    "• **Tag consistently** (e.g., #idea, #question, #action)\n"
                    "• Once a week, **connect related notes** using the \"Connections\" tab"
                )
            return body + (
                "• Give every note a clear **title**\n"
                "• Use **#tags** for easy filtering later\n"
                "• Group by theme, your future self will thank you!"
            )
        if intent == Intent.MOTIVATION:
            return (
                "Motivation follows action, not the other way around. So...\n\n"
                "👉 Open the doc.\n👉 Write one sentence.\n👉 That's a win.\n\n"
                "Progress > perfection. You've got this."
            )
        if intent == Intent.TIME_MANAGEMENT:
            return (
                "Time isn't the issue, **focus** is. ⏳\n\nTry the **15-minute rule**:\n"
                "1. Set a timer\n2. Work on *one thing only*\n3. When it rings, stop and breathe\n\n"
                "You'll often keep going. Even if you don't, you've won the day."
            )
        return self._general(message)

    def _learning_method(self, context: MentorContext) -> str:
        topic = "your current focus"
        if context.notes:
            topics = self.analyzer.ensure_analysis(context.notes[0]).key_topics
            topic = topics[0] if topics else topic
        style = context.user_profile.learning_style.value
        return (
            f"You've got great notes on **{topic}**, here's how to lock that in:\n\n"
            "• **Test yourself** *before* re-reading (it feels harder, but works better!)\n"
            "• **Space it out**: review today, then in 2 days\n"
            f"• Since you learn best with **{style}** styles, try explaining it out loud "
            "*while* sketching key ideas."
        )

    @staticmethod
    def _goal_achievement(context: MentorContext) -> str:
        active = next((g for g in context.goals if g.status == GoalStatus.ACTIVE), None)
        if active is None:
            return (
                "Goals thrive on clarity + tiny steps. Try this:\n\n"
                "1. Write your goal as: \"I will [verb] [object] by [date].\"\n"
                "2. What's the *very first* 2-minute action? Do it now."
            )

        body = f"Love that you're focused on **\"{active.name}\"**! 🎯\n\n"
        if active.progress < 30:
            return body + (
                "Start with the tiniest possible win, like opening the project file or "
                "writing one sentence. Momentum starts with *motion*, not motivation."
            )
        if active.progress < 80:
            return body + (
                "You're in the messy middle, this is where growth happens! 🌱 "
                "Pick *one* 15-minute action to move the needle today."
            )
        return body + "You're so close! What's the final 5% you need to cross the finish line?"

    def _general(self, message: str) -> str:
        analysis = self.analyzer.analyze(message)
        topics = ", ".join(analysis.key_topics) or "your thoughts"
        body = f"Thanks for sharing about *{topics}*.\n\n"
        if analysis.sentiment < -0.2:
            body += "This sounds tough. I'm proud of you for facing it. 💙\n\n"
        elif analysis.sentiment > 0.3:
            body += "Your energy is contagious! 🔥\n\n"
        return body + (
            "Here's what I'd suggest:\n"
            "• If it's **learning**: test yourself, don't just re-read\n"
            "• If it's **creating**: start messy, edit later\n"
            "• If it's **planning**: break it into a 2-minute starter task\n\n"
            "Want me to tailor this more? Just tell me your goal or topic."
        )
