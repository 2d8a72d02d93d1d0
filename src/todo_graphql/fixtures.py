"""
Static todo and user collections served by the API.

Both collections are built once at import time and are never mutated for the
lifetime of the process. Todos reference users by id only; a few of them point
at user ids that are not part of USERS.
"""
from __future__ import annotations

from typing import Tuple

from .models import TodoEntity, UserEntity

USERS: Tuple[UserEntity, ...] = (
    {
        "id": 1,
        "firstName": "Emily",
        "lastName": "Johnson",
        "age": 28,
        "gender": "female",
        "email": "emily.johnson@x.dummyjson.com",
        "phone": "+81 965-431-3024",
    },
    {
        "id": 2,
        "firstName": "Michael",
        "lastName": "Williams",
        "age": 35,
        "gender": "male",
        "email": "michael.williams@x.dummyjson.com",
        "phone": "+49 258-627-6644",
    },
    {
        "id": 3,
        "firstName": "Sophia",
        "lastName": "Brown",
        "age": 42,
        "gender": "female",
        "email": "sophia.brown@x.dummyjson.com",
        "phone": "+81 210-652-2785",
    },
    {
        "id": 4,
        "firstName": "James",
        "lastName": "Davis",
        "age": 45,
        "gender": "male",
        "email": "james.davis@x.dummyjson.com",
        "phone": "+49 614-958-9364",
    },
    {
        "id": 5,
        "firstName": "Emma",
        "lastName": "Miller",
        "age": 30,
        "gender": "female",
        "email": "emma.miller@x.dummyjson.com",
        "phone": "+91 759-776-1614",
    },
    {
        "id": 6,
        "firstName": "Olivia",
        "lastName": "Wilson",
        "age": 22,
        "gender": "female",
        "email": "olivia.wilson@x.dummyjson.com",
        "phone": "+91 607-295-6448",
    },
    {
        "id": 7,
        "firstName": "Alexander",
        "lastName": "Jones",
        "age": None,
        "gender": "male",
        "email": "alexander.jones@x.dummyjson.com",
        "phone": "+61 260-824-4986",
    },
    {
        "id": 8,
        "firstName": "Ava",
        "lastName": "Taylor",
        "age": 27,
        "gender": "female",
        "email": "ava.taylor@x.dummyjson.com",
        "phone": "+1 458-853-7877",
    },
)

TODOS: Tuple[TodoEntity, ...] = (
    {"id": 1, "todo": "Do something nice for someone you care about", "completed": False, "userId": 1},
    {"id": 2, "todo": "Memorize a poem", "completed": True, "userId": 2},
    {"id": 3, "todo": "Watch a classic movie", "completed": True, "userId": 3},
    {"id": 4, "todo": "Watch a documentary", "completed": False, "userId": 4},
    {"id": 5, "todo": "Invest in cryptocurrency", "completed": False, "userId": 5},
    {"id": 6, "todo": "Contribute code or a monetary donation to an open-source software project", "completed": False, "userId": 6},
    {"id": 7, "todo": "Solve a Rubik's cube", "completed": True, "userId": 7},
    {"id": 8, "todo": "Bake pastries for yourself and neighbor", "completed": True, "userId": 8},
    {"id": 9, "todo": "Go see a Broadway production", "completed": False, "userId": 1},
    {"id": 10, "todo": "Write a thank you letter to an influential person in your life", "completed": True, "userId": 3},
    {"id": 11, "todo": "Invite some friends over for a game night", "completed": False, "userId": 152},
    {"id": 12, "todo": "Have a football scrimmage with some friends", "completed": False, "userId": 5},
    {"id": 13, "todo": "Text a friend you haven't talked to in a long time", "completed": False, "userId": 2},
    {"id": 14, "todo": "Organize pantry", "completed": True, "userId": 86},
    {"id": 15, "todo": "Buy a new house decoration", "completed": False, "userId": 6},
)
