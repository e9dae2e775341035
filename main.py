from fastapi import FastAPI, WebSocket, WebSocketDisconnect
import uvicorn
import logging

from chat_user import ChatUser
from config import ServerConfig
from errors import ChatError
from room import RoomRegistry

settings = ServerConfig.from_env()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


def create_app(config: ServerConfig | None = None) -> FastAPI:
    """Build the application with its own room registry."""
    config = config or ServerConfig.from_env()

    app = FastAPI(title="Room chat")
    app.state.config = config
    app.state.rooms = RoomRegistry()

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/api/rooms")
    async def list_rooms():
        """List every room created so far with the names of its members."""
        return {"rooms": await app.state.rooms.rooms()}

    @app.websocket("/chat/{room_name}")
    async def chat_endpoint(websocket: WebSocket, room_name: str):
        await websocket.accept()
        room = app.state.rooms.get(room_name)
        user = ChatUser(websocket.send_text, room, joke_text=config.joke_text)
        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    raise WebSocketDisconnect(message.get("code", 1000))
                data = message.get("text")
                if data is None:
                    data = message.get("bytes", b"")
                try:
                    await user.handle_message(data)
                except ChatError as e:
                    logger.warning(f"Rejected message from {user.name!r} in room {room_name}: {e}")
        except WebSocketDisconnect:
            logger.info(f"Client {user.name!r} disconnected from room {room_name}")
        finally:
            await user.handle_close()

    return app


app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.reload)
