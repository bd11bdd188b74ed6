from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Any, Dict, List
import json
import os

app = FastAPI(title="Mock Generation Server", version="1.0.0")
# MOCK_GENERATION_MODE: advise (default) | silent | error
MODE = os.getenv("MOCK_GENERATION_MODE", "advise")

CANNED_ADVISORY = (
    "The interest rate you entered is well away from the prevailing rate for this period. "
    "Please double-check the rate and period you entered."
)


class ChatRequest(BaseModel):
    model: str
    messages: List[Dict[str, Any]]
    stream: bool = False
    format: str | None = None


@app.get("/health")
def health(): return {"status": "ok"}

@app.post("/api/chat")
def chat(body: ChatRequest):
    if MODE == "error":
        raise HTTPException(status_code=503, detail="model unavailable")
    user_prompt = next((m["content"] for m in body.messages if m.get("role") == "user"), "")
    message = "" if MODE == "silent" or "FD Amount" not in user_prompt else CANNED_ADVISORY
    return {
        "model": body.model,
        "message": {"role": "assistant", "content": json.dumps({"advisoryMessage": message})},
        "done": True,
    }
