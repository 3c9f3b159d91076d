# dependencies.py
"""
FastAPI dependencies shared by the routers.
"""
import asyncio
import weakref
from typing import AsyncGenerator, Generator

from fastapi import Depends
from sqlalchemy.orm import sessionmaker

from database import SessionLocal, get_session_context
from services.clock import Clock, SystemClock
from services.state import AppState

# One lock per event loop; an asyncio.Lock cannot be shared between loops
_operation_locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = (
     weakref.WeakKeyDictionary()
)


def _operation_lock() -> asyncio.Lock:
     loop = asyncio.get_running_loop()
     lock = _operation_locks.get(loop)
     if lock is None:
          lock = _operation_locks[loop] = asyncio.Lock()
     return lock


def get_session_factory() -> sessionmaker:
     return SessionLocal


def get_clock() -> Clock:
     return SystemClock()


async def serialize_operations() -> AsyncGenerator[None, None]:
     """
     Hold the operation lock for the lifetime of a request.

     Waiting happens on the event loop, so queued requests do not occupy
     threadpool workers.
     """
     async with _operation_lock():
          yield


def get_state(
     _: None = Depends(serialize_operations),
     session_factory: sessionmaker = Depends(get_session_factory),
     clock: Clock = Depends(get_clock),
) -> Generator[AppState, None, None]:
     """
     FastAPI dependency that provides the AppState for one request.

     Resolved after serialize_operations and torn down before it, so the
     session has committed by the time the next operation starts.

     Usage:
          @router.get("")
          def list_items(state: AppState = Depends(get_state)):
               return PropertyService.get_all_properties(state)

     Yields:
          AppState: state bound to a session that commits when the route returns
     """
     with get_session_context(session_factory) as db:
          yield AppState.from_session(db, clock)
