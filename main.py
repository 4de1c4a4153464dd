from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from dataclasses import is_dataclass
import asyncio
import logging
import os

from lexer import Lexer
from parser import Parser
from interpreter import Interpreter, parse
from errors import JasicError, ParseError, StepLimitError
from values import NumberValue, StringValue
from jasic_ast import BinaryOp

logger = logging.getLogger(__name__)

MAX_STEPS = int(os.environ.get("JASIC_MAX_STEPS", "100000"))
YIELD_EVERY = 100
STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")

app = FastAPI(title="Jasic IDE", version="1.0.0")

# --- Data models ---
class CodeRequest(BaseModel):
    code: str

# --- Helpers ---

def error_text(e):
    return f"{type(e).__name__}: {e}"

def token_to_dict(token):
    return {"type": token.type.name, "text": token.text, "line": token.line, "column": token.column}

def ast_to_dict(node):
    if isinstance(node, (NumberValue, StringValue)):
        return {"type": type(node).__name__, "value": node.value}
    if isinstance(node, BinaryOp):
        # flattened so long operator chains stay shallow in JSON
        rest = []
        while isinstance(node, BinaryOp):
            rest.append({"op": node.op, "right": ast_to_dict(node.right)})
            node = node.left
        return {"type": "BinaryOp", "first": ast_to_dict(node), "rest": rest[::-1]}
    if not is_dataclass(node):
        return {"type": "Unknown", "value": str(node)}
    result = {"type": type(node).__name__}
    for key, value in node.__dict__.items():
        if value is None: continue
        if isinstance(value, (int, str, float, bool)): result[key] = value
        elif isinstance(value, dict): result[key] = {str(k): ast_to_dict(v) if is_dataclass(v) else v for k, v in value.items()}
        elif isinstance(value, list): result[key] = [ast_to_dict(v) for v in value]
        else: result[key] = ast_to_dict(value)
    return result

def run_bounded(code, max_steps=None):
    """
    Runs `code` to completion, collecting printed lines. Raises StepLimitError
    when the program is still running after `max_steps` statements; the lines
    printed so far are attached to any JasicError as `output`.
    """
    max_steps = MAX_STEPS if max_steps is None else max_steps
    output = []
    try:
        interpreter = Interpreter(parse(code), output.append)
        steps = 0
        while interpreter.running:
            if steps >= max_steps:
                raise StepLimitError(f"Program still running after {max_steps} statements")
            interpreter.step()
            steps += 1
    except JasicError as e:
        e.output = output
        raise
    return output

class WebInterpreter(Interpreter):
    """
    Interpreter that streams printed lines over a WebSocket and can be
    stopped by the client between statements.
    """
    def __init__(self, program, websocket=None):
        self.pending = []
        super().__init__(program, output=self.pending.append)
        self.websocket = websocket
        self.should_stop = False

    async def run_async(self, max_steps=None):
        max_steps = MAX_STEPS if max_steps is None else max_steps
        steps = 0
        try:
            while self.running and not self.should_stop:
                if steps >= max_steps:
                    raise StepLimitError(f"Program still running after {max_steps} statements")
                self.step()
                steps += 1
                await self._flush()
                if steps % YIELD_EVERY == 0:
                    await asyncio.sleep(0)
        finally:
            await self._flush()

    async def _flush(self):
        lines = list(self.pending)
        self.pending.clear()
        for line in lines:
            await self._output(line)

    async def _output(self, text):
        if self.websocket: await self.websocket.send_json({"type": "output", "data": text})

async def handle_execution(websocket: WebSocket, code: str):
    """Parses `code`, then runs it while listening for a stop request."""
    interpreter = None

    async def message_handler():
        try:
            while True:
                data = await websocket.receive_json()
                if data.get("type") == "stop":
                    if interpreter: interpreter.should_stop = True
                    break
        except WebSocketDisconnect:
            if interpreter: interpreter.should_stop = True

    message_task = None
    try:
        interpreter = WebInterpreter(parse(code), websocket)
        await websocket.send_json({"type": "execution_started"})
        message_task = asyncio.create_task(message_handler())
        await interpreter.run_async()
        await websocket.send_json({"type": "execution_finished", "success": True, "stopped": interpreter.should_stop})
    except JasicError as e:
        logger.info("Interactive run failed: %s", error_text(e))
        await websocket.send_json({"type": "execution_finished", "success": False, "error": error_text(e)})
    finally:
        if message_task:
            message_task.cancel(); await asyncio.gather(message_task, return_exceptions=True)

# --- API endpoints ---
@app.websocket("/api/execute-interactive")
async def execute_interactive(websocket: WebSocket):
    await websocket.accept()
    try:
        code = (await websocket.receive_json()).get("code", "")
        await handle_execution(websocket, code)
    except WebSocketDisconnect: pass
    except Exception as e:
        logger.exception("Interactive session failed")
        try: await websocket.send_json({"type": "error", "message": error_text(e)})
        except RuntimeError: pass

@app.post("/api/compile")
async def compile_code(request: CodeRequest):
    try:
        tokens = Lexer(request.code).tokenize()
        program = Parser(tokens).parse_program()
    except ParseError as e:
        return {"success": False, "errors": [str(e)]}
    return {
        "success": True,
        "tokens": [token_to_dict(t) for t in tokens],
        "ast": ast_to_dict(program),
        "labels": dict(program.labels),
    }

@app.post("/api/run")
def run_code(request: CodeRequest):
    try:
        output = run_bounded(request.code)
    except JasicError as e:
        logger.info("Run failed: %s", error_text(e))
        return {"success": False, "output": getattr(e, "output", []), "error": error_text(e)}
    return {"success": True, "output": output}

@app.get("/api/examples")
async def get_examples():
    return {
        "hello": {"name": "Hello", "code": "' greet the world\nprint \"hello, \" + \"world\"\n"},
        "count": {"name": "Count to five", "code": "count = 0\n:loop\ncount = count + 1\nprint count\nif count < 5 then loop\nprint \"done\"\n"},
        "compare": {"name": "Larger of two", "code": "a = 7\nb = 12\nif a > b then first\nprint b\ngoto end\n:first\nprint a\n:end\n"},
    }

# --- App setup ---
if os.path.isdir(STATIC_DIR):
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")
