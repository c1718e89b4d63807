# check_connection.py
# Reads config.ini and checks that the TechSupport database is reachable through pytds.

from techsupport.db import TechSupportDB


def main(config_path: str = 'config.ini') -> bool:
    print("--- TechSupport Connection Check (using config.ini and pytds) ---")
    try:
        db = TechSupportDB.from_config(config_path)
        print(f"Attempting to connect to server: '{db.server}' on port: {db.port}...")

        with db.get_connection() as cnxn:
            print("\n✅ SUCCESS! Connection was established successfully.")
            cursor = cnxn.cursor()
            cursor.execute("SELECT SERVERPROPERTY('productversion'), SERVERPROPERTY ('productlevel'), SERVERPROPERTY ('edition')")
            version_info = cursor.fetchone()
            print("\nSQL Server Info:")
            print(f" Version: {version_info[0]}")
            print(f" Level:   {version_info[1]}")
            print(f" Edition: {version_info[2]}")
        return True

    except (KeyError, TechSupportDB.Error, OSError) as ex:
        print("\n❌ FAILED to connect.")
        print(f"Error details: {ex!r}")
        return False


if __name__ == "__main__":
    raise SystemExit(0 if main() else 1)
