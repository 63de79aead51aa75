"""
Note Storage For Webhook Relay.
Key-Value Style Notes On MySQL With Connection Pooling And Error Handling.
"""

import pymysql
from pymysql.cursors import DictCursor
from dbutils.pooled_db import PooledDB
from typing import Optional, List, Dict, Any
from contextlib import contextmanager

from Config import config
from Logging_Config import logger


class DatabaseManager:
    """Database Manager With A Lazily Created Connection Pool."""

    def __init__(self):
        self._pool = None

    @property
    def pool(self) -> PooledDB:
        """Connection Pool, Opened On First Use."""
        if self._pool is None:
            self._pool = PooledDB(
                creator=pymysql,
                host=config.database.host,
                user=config.database.user,
                password=config.database.password,
                database=config.database.name,
                port=config.database.port,
                charset='utf8mb4',
                cursorclass=DictCursor,
                autocommit=True,
                mincached=2,
                maxcached=10,
                maxconnections=20,
                blocking=True,
                maxusage=1000
            )
            logger.info(f"Database Connection Pool Initialized For {config.database.host}:{config.database.port}")
        return self._pool

    @contextmanager
    def get_connection(self):
        """Get A Database Connection From The Pool."""
        conn = None
        try:
            conn = self.pool.connection()
            yield conn
        except Exception as e:
            logger.error(f"Database Connection Error : {e}")
            raise
        finally:
            if conn:
                conn.close()

    def init_database(self) -> bool:
        """
        Create The Database And Notes Table If They Don't Exist.

        Returns:
            bool: True If Successful, False Otherwise
        """
        try:
            # First Connect Without Database To Create It
            temp_conn = pymysql.connect(
                host=config.database.host,
                user=config.database.user,
                password=config.database.password,
                port=config.database.port,
                charset='utf8mb4'
            )

            try:
                with temp_conn.cursor() as cursor:
                    cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{config.database.name}`")
                    logger.info(f"Database '{config.database.name}' Created Or Already Exists")
                temp_conn.commit()
            finally:
                temp_conn.close()

            with self.get_connection() as conn:
                with conn.cursor() as cursor:
                    cursor.execute("""
                        CREATE TABLE IF NOT EXISTS Notes (
                            Note_Id VARCHAR(32) PRIMARY KEY,
                            Telegram_Id BIGINT NOT NULL,
                            Content TEXT NOT NULL,
                            Created_At TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                            INDEX idx_telegram_id (Telegram_Id)
                        ) CHARACTER SET utf8mb4
                    """)

                    logger.info("Database Tables Created Successfully")
                    return True

        except Exception as e:
            logger.error(f"Failed To Initialize Database: {e}")
            return False

    def check_database_connection(self) -> bool:
        """
        Check If Database Connection Is Working.

        Returns:
            bool: True If Connection Is Healthy
        """
        try:
            with self.get_connection() as conn:
                with conn.cursor() as cursor:
                    cursor.execute("SELECT 1")
                    result = cursor.fetchone()
                    return result is not None
        except Exception as e:
            logger.error(f"Database Health Check Failed: {e}")
            return False

    def put_note(self, note_id: str, content: str, telegram_id: int) -> bool:
        """
        Store A Note, Replacing Any Note With The Same ID.

        Args:
            note_id: Short Generated Note ID
            content: Note Text
            telegram_id: Telegram User ID Of The Author

        Returns:
            bool: True If Successful
        """
        try:
            with self.get_connection() as conn:
                with conn.cursor() as cursor:
                    cursor.execute("""
                        INSERT INTO Notes (Note_Id, Telegram_Id, Content)
                        VALUES (%s, %s, %s)
                        ON DUPLICATE KEY UPDATE
                            Telegram_Id=VALUES(Telegram_Id),
                            Content=VALUES(Content)
                    """, (note_id, telegram_id, content))

                    logger.info(f"Note {note_id} Saved For User {telegram_id}")
                    return True

        except Exception as e:
            logger.error(f"Failed To Save Note {note_id} For User {telegram_id}: {e}")
            return False

    def get_note(self, note_id: str) -> Optional[str]:
        """
        Get The Content Of A Note.

        Returns:
            Note Content Or None If Not Found
        """
        try:
            with self.get_connection() as conn:
                with conn.cursor() as cursor:
                    cursor.execute("SELECT Content FROM Notes WHERE Note_Id = %s", (note_id,))
                    row = cursor.fetchone()
                    return row['Content'] if row else None

        except Exception as e:
            logger.error(f"Failed To Get Note {note_id}: {e}")
            return None

    def delete_note(self, note_id: str) -> bool:
        """
        Delete A Note. Deleting A Missing Note Is Not An Error.

        Returns:
            bool: True If Successful
        """
        try:
            with self.get_connection() as conn:
                with conn.cursor() as cursor:
                    cursor.execute("DELETE FROM Notes WHERE Note_Id = %s", (note_id,))

                    logger.info(f"Note {note_id} Deleted")
                    return True

        except Exception as e:
            logger.error(f"Failed To Delete Note {note_id}: {e}")
            return False

    def list_notes(self) -> List[Dict[str, Any]]:
        """
        Get Every Stored Note.

        Returns:
            List Of {"Note_Id", "Telegram_Id", "Content"} Dictionaries
        """
        try:
            with self.get_connection() as conn:
                with conn.cursor() as cursor:
                    cursor.execute("""
                        SELECT Note_Id, Telegram_Id, Content
                        FROM Notes
                        ORDER BY Created_At
                    """)

                    notes = cursor.fetchall()
                    logger.debug(f"Retrieved {len(notes)} Notes")
                    return list(notes)

        except Exception as e:
            logger.error(f"Failed To List Notes: {e}")
            return []

    def search_notes(self, term: str) -> List[Dict[str, Any]]:
        """
        Find Notes Whose Content Contains A Term (Case-Insensitive).

        Args:
            term: Text To Look For

        Returns:
            List Of Matching Note Dictionaries
        """
        term = term.lower()
        return [note for note in self.list_notes() if term in (note['Content'] or '').lower()]


# Global Database Manager Instance
db_manager = DatabaseManager()
