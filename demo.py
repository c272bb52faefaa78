import asyncio, aioconsole, colorama, logging, rubiks, argparse

logging.basicConfig(level=logging.INFO)
colorama.init()

parser = argparse.ArgumentParser()
parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
parser.add_argument("-n", "--no-wait", action="store_true", help="Don't wait for ENTER between challenge steps")
args = parser.parse_args()

if args.debug: rubiks.LOGGER.setLevel(logging.DEBUG)

async def run_challenge(handler: rubiks.MoveHandler, wait: bool):
    seq = rubiks.MoveSequence.challenge()
    print(rubiks.render(handler.cur_state, "Initial State", color=True))

    print()
    print(f"Sequence: {seq}")
    print()
    print(seq.detailed_description)

    #Execute the moves one by one, the handler only applies the next move once we ask for it
    if wait: await aioconsole.ainput("Press ENTER to continue")
    for move, step in handler.steps(seq):
        print(f"Step {step}/{len(seq)}: {move.description}")
        print("-" * 50)
        print(rubiks.render(handler.cur_state, color=True))

        if wait and step < len(seq): await aioconsole.ainput("Press ENTER to continue")

    rubiks.LOGGER.log(logging.INFO, "Challenge completed")
    print(rubiks.render(handler.cur_state, "Final State", color=True))

async def command_loop(handler: rubiks.MoveHandler):
    #Main command loop
    view = None
    history = []
    try:
        while True:
            line = (await aioconsole.ainput("> ")).strip()
            cmd, _, arg = line.partition(" ")
            cmd = cmd.lower()
            if cmd == "h" or cmd == "help":
                print("(h)elp:           Shows this help text")
                print("(q)uit:           Exits the demo")
                print("(s)how:           Shows the current state of the cube")
                print("(m)ove <moves>:   Applies moves given in standard notation, e.g. m F R' U")
                print("(u)ndo:           Reverts the last applied moves")
                print("(c)hallenge:      Runs the challenge sequence F R' U B' L D' step by step")
                print("(r)eset:          Resets the cube to the solved state")
                print("(v)iew:           Opens a 3D view of the cube which updates in real time")
                print("(d)ebug:          Toggles debug logging")
            elif cmd == "q" or cmd == "quit":
                print("Exiting...")
                break
            elif cmd == "s" or cmd == "show":
                print(rubiks.render(handler.cur_state, color=True))
                print(f"solved: {handler.cur_state.is_solved}")
            elif cmd == "m" or cmd == "move":
                try: seq = rubiks.MoveSequence.from_notation(arg)
                except rubiks.InvalidMoveNotationError as e:
                    print(e)
                    continue

                handler.execute_sequence(seq)
                if len(seq) > 0: history.append(seq)
                print(rubiks.render(handler.cur_state, color=True))
            elif cmd == "u" or cmd == "undo":
                if len(history) == 0:
                    print("Nothing to undo")
                    continue

                handler.execute_sequence(history.pop().inverse())
                print(rubiks.render(handler.cur_state, color=True))
            elif cmd == "c" or cmd == "challenge":
                await run_challenge(handler, not args.no_wait)
                history.append(rubiks.MoveSequence.challenge())
            elif cmd == "r" or cmd == "reset":
                handler.reset()
                history.clear()
                if view: view.cube.update_state(handler.cur_state, None)
                print(rubiks.render(handler.cur_state, color=True))
            elif cmd == "v" or cmd == "view":
                if not view or view.has_exit:
                    from view import CubeView

                    def view_move_cb(state: rubiks.CubeState, move: rubiks.Move):
                        if view: view.cube.update_state(state, move)
                    handler.register_handler(view_move_cb)

                    view, _ = await CubeView.run_thread(lambda: handler.unregister_handler(view_move_cb))
                    view.cube.update_state(handler.cur_state, None)
                    rubiks.LOGGER.log(logging.INFO, "Opened 3D view")
            elif cmd == "d" or cmd == "debug":
                if rubiks.LOGGER.level != logging.DEBUG:
                    rubiks.LOGGER.setLevel(logging.DEBUG)
                    print("Enabled debug logging")
                else:
                    rubiks.LOGGER.setLevel(logging.INFO)
                    print("Disabled debug logging")
            elif cmd == "": continue
            else: print("Unknown command")
    finally:
        if view: view.close_threadsafe()

async def main():
    handler = rubiks.MoveHandler()
    print("Rubik's Cube Simulator")
    print("Green (Front) - Red (Right) - White (Up)")
    print("Type 'help' for a list of commands")

    await command_loop(handler)

asyncio.run(main())
