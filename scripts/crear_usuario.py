"""Script para aprovisionar un usuario mediante sp_CrearUsuario."""
import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.database import configurar_db, dispose_db
from app.core.procedures import ProcedureStore
from app.core.roles import Rol
from app.core.security import hash_password


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Crea un usuario con contraseña hasheada (bcrypt).")
    parser.add_argument("username")
    parser.add_argument("password")
    parser.add_argument("--nombre", required=True)
    parser.add_argument("--rol", choices=[r.value for r in Rol], default=Rol.USER.value)
    parser.add_argument("--email")
    parser.add_argument("--telefono")
    parser.add_argument("--id-centro", dest="id_centro")
    return parser.parse_args(argv)


async def crear_usuario(args: argparse.Namespace) -> None:
    async with configurar_db()() as session:
        store = ProcedureStore(session)
        filas = await store.execute(
            "sp_CrearUsuario",
            nombre=args.nombre,
            username=args.username,
            password_hash=hash_password(args.password),
            rol=args.rol,
            id_centro=args.id_centro,
            email=args.email,
            telefono=args.telefono,
        )
        await session.commit()
    await dispose_db()
    print(f"  + Usuario creado: {args.username} ({args.rol}) id={filas[0]['id_usuario'] if filas else '?'}")


if __name__ == "__main__":
    asyncio.run(crear_usuario(parse_args()))
