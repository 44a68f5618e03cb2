"""
Sample Transcripts for the Call Scorer
Realistic support calls used by the demo and the tests.
"""

from models import Utterance

# =============================================================================
# GOOD CALL - Connectivity issue (complete opening, diagnosis and closure)
# =============================================================================
GOOD_CALL_TRANSCRIPT = """Agent: Good morning, thank you for calling Northwind support, my name is Priya. How can I help you today?

Customer: Hi, my internet keeps dropping every evening and I work from home.

Agent: I'm sorry to hear that, I understand how frustrating that must be. Let me help you with this. When did the drops start?

Customer: About a week ago.

Agent: Could you tell me which lights are blinking on the router?

Customer: The orange one blinks every few minutes.

Agent: Thank you. Here's what we can do: I'll push a firmware fix to the router and reset the line. Please restart it now.

Customer: Okay, it's restarting. The light is green now.

Agent: Great, the connection looks stable on my side. How does it look on your end, does that work for you?

Customer: Yes, it's working now. Thanks!

Agent: Absolutely, glad to help. Is there anything else I can help you with today?

Customer: No, that's all.

Agent: Thank you for calling Northwind. Have a great day!"""

# =============================================================================
# POOR CALL - No greeting, no diagnosis, no closure
# =============================================================================
POOR_CALL_TRANSCRIPT = """Agent: Yeah?

Customer: Hi, my internet keeps dropping and I need it fixed.

Agent: Did you restart it?

Customer: Yes, twice. It still drops every evening.

Agent: Then it's probably your wiring. Call back if it gets worse.

Customer: That's not helpful at all.

Agent: Bye."""

# =============================================================================
# BILLING CALL - Strong empathy, partial closure
# =============================================================================
BILLING_CALL_TRANSCRIPT = """Agent: Hello, this is Marcus with Northwind billing. What can I do for you?

Customer: I was charged twice this month and I'm really annoyed.

Agent: I apologize for that, I can imagine how annoying a double charge is.

Customer: It's the second time this year.

Agent: I understand. Let me check your account. I see here two payments on the 3rd.

Agent: I've reversed the duplicate payment, it should be resolved within three days.

Customer: Okay, thanks.

Agent: Certainly. Take care."""

# =============================================================================
# UNLABELED CALL - Transcript without role prefixes
# =============================================================================
UNLABELED_TRANSCRIPT = """Hello, I need help with my bill.
Sure, can you give me your account number?
It's 4471."""

ALL_TRANSCRIPTS = {
    "good_call": GOOD_CALL_TRANSCRIPT,
    "poor_call": POOR_CALL_TRANSCRIPT,
    "billing_call": BILLING_CALL_TRANSCRIPT,
    "unlabeled_call": UNLABELED_TRANSCRIPT
}

# =============================================================================
# DIARIZED CALL - Speaker labels only, customer speaks first
# =============================================================================
SAMPLE_UTTERANCES = [
    Utterance(speaker_id="A", text="Hi, I'm calling because my bill looks wrong.", confidence=0.93),
    Utterance(
        speaker_id="B",
        text="I'm sorry to hear that. My name is Sam from the billing department, let me check your account.",
        confidence=0.95
    ),
    Utterance(speaker_id="A", text="Sure, the account is under Jordan Lee.", confidence=0.91),
    Utterance(
        speaker_id="B",
        text="Thank you. I see here a late fee that shouldn't be there, I've removed it. "
             "Is there anything else I can help you with?",
        confidence=0.94
    ),
    Utterance(speaker_id="A", text="No, that's everything. Thanks.", confidence=0.96),
    Utterance(speaker_id="B", text="You're welcome, have a good day.", confidence=0.97)
]
