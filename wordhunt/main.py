from __future__ import annotations
import logging
from typing import Dict, List

import socketio
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import config
from .dictionary import Dictionary
from .errors import SessionNotFound
from .managers.game import GameManager
from .schemas import PlayerScore, PuzzleSession, StartRequest, SubmitRequest, WordScore

logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins='*' if config.CORS_ORIGINS == ['*'] else config.CORS_ORIGINS)
app = FastAPI(title="Word Hunt Server", version="0.1.0")

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

# Loaded once per process; a missing list leaves the server up but rejecting every word
dictionary = Dictionary.load(config.WORDS_PATH)
games = GameManager(sio, dictionary)


@app.exception_handler(SessionNotFound)
async def session_not_found(request, exc: SessionNotFound):
    return JSONResponse(status_code=404, content={'error': str(exc)})


# REST Endpoints
@app.get('/health')
async def health():
    return {
        'status': 'ok' if games.dictionary.available else 'degraded',
        'dictionaryLoaded': games.dictionary.available,
        'dictionarySize': len(games.dictionary),
    }

@app.post('/game/start', status_code=201, response_model=PuzzleSession)
async def start_game(body: StartRequest):
    return await games.start_session(body.playerName)

@app.get('/game/{game_id}', response_model=PuzzleSession)
async def get_game(game_id: str):
    return games.get(game_id)

@app.post('/game/{game_id}/submit')
async def submit_word(game_id: str, body: SubmitRequest):
    result = await games.submit_word(game_id, body.word)
    if not result.accepted:
        raise HTTPException(status_code=400, detail={'error': result.message, 'reason': result.reason.value})
    return {'message': result.message, 'points': result.points, 'score': result.totalScore}

@app.post('/game/{game_id}/finish')
async def finish_game(game_id: str):
    return await games.finish_session(game_id)

@app.get('/leaderboard', response_model=List[WordScore])
async def leaderboard():
    return games.leaderboard()

@app.get('/leaderboard/players', response_model=List[PlayerScore])
async def player_leaderboard():
    return games.player_leaderboard()

# Dictionary validation REST endpoint
@app.get('/dict/validate')
async def validate_word(word: str) -> Dict[str, object]:
    return {'word': word.lower(), 'valid': games.dictionary.is_valid_word(word)}


# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    await sio.emit('pong', to=sid)

@sio.on('ping')
async def on_ping(sid):
    await sio.emit('pong', to=sid)

@sio.on('join-game')
async def join_game(sid, game_id: str):
    try:
        session = games.get(game_id)
    except SessionNotFound as exc:
        await sio.emit('game:error', {'error': str(exc)}, to=sid)
        return
    await sio.enter_room(sid, game_id)
    await sio.emit('game:state', session.model_dump(), to=sid)

@sio.on('leave-game')
async def leave_game(sid, game_id: str):
    await sio.leave_room(sid, game_id)

# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn wordhunt.main:application --reload --host 0.0.0.0 --port 8000
