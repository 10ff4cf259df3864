"""
Fixed user-facing texts (Turkish).
"""
from .replies import Button
from ..confirmation.signals import ConfirmationSignal

START = "*Hava durumunu öğrenmek istediğin ili gir.‼️*"
NOT_FOUND = "*Gönderdiğin ili bulamadım.*"
LOOKUP_FAILED = "*Hava durumu alınamadı. Lütfen tekrar deneyin.*"
LOOKUP_FAILED_ALERT = "Hava durumu alınamadı. Lütfen tekrar deneyin."
ASK_AGAIN = "Lütfen ilinizi tekrar girin."
ABOUT = "Bu bot, hava durumunu doğrudan almanız için @erd3mbey tarafından yazılmıştır."
FALLBACK = "Bir şeyler ters gitti. Tekrar dene."

CONFIRMATION_BUTTONS = [
    [
        Button("Evet ✅", ConfirmationSignal.ACCEPT.value),
        Button("Hayır ❌", ConfirmationSignal.REJECT.value),
    ],
    [
        Button("Sahip 👍", ConfirmationSignal.ABOUT.value),
    ],
]
