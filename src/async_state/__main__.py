from async_state import (
    AsyncState,
    make_error_state,
    make_initial_state,
    make_loading_state,
    make_refetch_state,
    make_success_state,
    render,
)

if __name__ == "__main__":
    s1: AsyncState[int, str] = make_initial_state()
    s2: AsyncState[int, str] = make_loading_state()
    s3: AsyncState[int, str] = make_success_state(1337)
    s4: AsyncState[int, str] = make_refetch_state(1337)
    s5: AsyncState[int, str] = make_error_state("Network error", 1337)
    s6: AsyncState[int, str] = make_loading_state(1337, "Network error")

    for s in (s1, s2, s3, s4, s5, s6):
        print(render(s))
