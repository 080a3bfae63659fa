"""Unit tests for the simple strategies."""

import pytest
from sudoku_logic.core.cells import CellBoard, UnsolvedCell
from sudoku_logic.core.modifications import RemoveCandidates, SetValue
from sudoku_logic.strategies import (
    box_line_reduction,
    hidden_pairs,
    hidden_quads,
    hidden_singles,
    hidden_triples,
    naked_pairs,
    naked_quads,
    naked_singles,
    naked_triples,
    pointing_pairs_pointing_triples,
    prune_candidates,
)


PUZZLE = "010040560230615080000800100050020008600781005900060020006008000080473056045090010"


class TestPruneCandidates:
    """Tests for prune_candidates."""

    def test_fresh_board(self, assert_logical_solution):
        board = CellBoard.from_simple_string(PUZZLE)
        expected = [RemoveCandidates(0, 0, {1, 2, 3, 4, 5, 6, 9})]
        actual = assert_logical_solution(expected, board, prune_candidates, subset=True)
        assert len(actual) == PUZZLE.count("0")
        assert RemoveCandidates(0, 0, {1, 2, 3, 4, 5, 6, 9}) in actual

    def test_pruned_board_is_stable(self):
        board = CellBoard.from_simple_string(PUZZLE)
        for modification in prune_candidates(board):
            row, column = modification.row, modification.column
            remaining = board.get(row, column).candidates - modification.candidates
            board.set(row, column, UnsolvedCell(row, column, remaining))
        assert prune_candidates(board) == []


class TestNakedSingles:
    """Tests for naked_singles."""

    def test_two_singles(self, assert_logical_solution):
        board = (
            "{2367}{379}{29}1{3468}5{2389}{9}{289}"
            "14{259}{389}{38}{38}67{289}"
            "{3567}8{59}{3679}{36}24{59}{19}"
            "{2458}63{58}7{48}{89}1{489}"
            "9{57}{2458}{568}{124568}{1468}{78}{46}3"
            "{478}1{48}{368}9{3468}52{4678}"
            "{345}{359}72{1356}{136}{19}8{1469}"
            "{48}26{78}{18}{178}{179}35"
            "{358}{35}{158}4{13568}9{127}{6}{1267}"
        )
        expected = [
            SetValue(0, 7, 9),
            SetValue(8, 7, 6),
        ]
        assert_logical_solution(expected, board, naked_singles)


class TestHiddenSingles:
    """Tests for hidden_singles."""

    def test_every_unit(self, assert_logical_solution):
        board = (
            "2{459}{1569}{159}7{159}{159}38"
            "{458}{4589}{159}{123589}{159}6{1259}7{145}"
            "3{5789}{159}{12589}4{12589}6{1259}{15}"
            "{456}{3459}8{1569}2{1459}7{159}{135}"
            "1{23459}{2359}{5789}{59}{45789}{23589}{2589}6"
            "{56}{259}7{15689}3{1589}4{12589}{15}"
            "{57}{2357}4{12357}8{12357}{135}{156}9"
            "{578}6{235}4{159}{123579}{1358}{158}{1357}"
            "91{35}{357}6{357}{358}{458}2"
        )
        expected = [
            SetValue(0, 1, 4),
            SetValue(0, 2, 6),
            SetValue(1, 3, 3),
            SetValue(1, 8, 4),
            SetValue(2, 1, 7),
            SetValue(6, 7, 6),
            SetValue(7, 0, 8),
            SetValue(7, 8, 7),
            SetValue(8, 7, 4),
        ]
        assert_logical_solution(expected, board, hidden_singles)


class TestNakedPairs:
    """Tests for naked_pairs."""

    def test_1(self, assert_logical_solution):
        board = (
            "4{16}{16}{125}{12567}{2567}938"
            "{78}32{58}941{56}{567}"
            "{178}953{1678}{67}24{67}"
            "37{18}6{258}9{58}{1258}4"
            "529{48}{48}1673"
            "6{18}47{258}3{58}9{125}"
            "957{124}{1246}83{126}{126}"
            "{18}{168}39{12567}{2567}4{12568}{1256}"
            "24{168}{15}3{56}7{1568}9"
        )
        expected = [
            RemoveCandidates(0, 3, {1}),
            RemoveCandidates(0, 4, {1, 6}),
            RemoveCandidates(0, 5, {6}),
            RemoveCandidates(2, 0, {1, 7}),
            RemoveCandidates(2, 4, {6, 7}),
            RemoveCandidates(3, 4, {8}),
            RemoveCandidates(3, 7, {5, 8}),
            RemoveCandidates(5, 4, {8}),
            RemoveCandidates(5, 8, {5}),
        ]
        assert_logical_solution(expected, board, naked_pairs)

    def test_2(self, assert_logical_solution):
        board = (
            "{1467}8{567}{12457}9{12}{247}3{24}"
            "{147}3{57}{12457}{1278}{128}{247}69"
            "9{47}2{47}63158"
            "{67}2{67}8{13}459{13}"
            "8519{23}7{23}46"
            "3946{12}587{12}"
            "563{12}4{12}987"
            "2{47}{789}{37}{378}{689}{346}15"
            "{47}1{789}{37}5{689}{346}2{34}"
        )
        expected = [
            RemoveCandidates(0, 3, {7}),
            RemoveCandidates(1, 3, {7}),
            RemoveCandidates(1, 5, {1, 2}),
            RemoveCandidates(2, 3, {7}),
            RemoveCandidates(7, 2, {7}),
            RemoveCandidates(7, 4, {3, 7}),
            RemoveCandidates(8, 2, {7}),
        ]
        assert_logical_solution(expected, board, naked_pairs)


class TestNakedTriples:
    """Tests for naked_triples."""

    def test_1(self, assert_logical_solution):
        board = (
            "{36}7{16}4{135}8{135}29"
            "{369}{169}2{1579}{135}{5679}{1358}{3568}4"
            "854{19}2{69}{13}{36}7"
            "{569}{169}83742{59}{16}"
            "{45679}2{15679}{589}{58}{59}{3589}{34589}{16}"
            "{459}{49}32617{4589}{58}"
            "{457}{48}{57}{578}93612"
            "2{689}{5679}{1578}{158}{57}4{589}3"
            "13{59}642{589}7{58}"
        )
        expected = [
            RemoveCandidates(4, 0, {5, 9}),
            RemoveCandidates(4, 2, {5, 9}),
            RemoveCandidates(4, 6, {5, 8, 9}),
            RemoveCandidates(4, 7, {5, 8, 9}),
        ]
        assert_logical_solution(expected, board, naked_triples, subset=True)

    def test_2(self, assert_logical_solution):
        board = (
            "294513{78}{78}6"
            "6{57}{57}842319"
            "3{18}{18}697254"
            "{18}{1278}{123789}{23}56{14789}{24789}{238}"
            "{15}4{1579}{23}8{19}{1579}6{23}"
            "{158}{12568}{1235689}47{19}{1589}{289}{238}"
            "73{28}164{89}{289}5"
            "9{268}{268}735{48}{248}1"
            "4{15}{15}928637"
        )
        expected = [
            RemoveCandidates(3, 1, {1, 8}),
            RemoveCandidates(3, 2, {1, 8}),
            RemoveCandidates(3, 6, {8}),
            RemoveCandidates(3, 7, {2, 8}),
            RemoveCandidates(4, 2, {1, 5}),
            RemoveCandidates(5, 1, {1, 5, 8}),
            RemoveCandidates(5, 2, {1, 5, 8}),
            RemoveCandidates(5, 6, {8}),
            RemoveCandidates(5, 7, {2, 8}),
        ]
        assert_logical_solution(expected, board, naked_triples, subset=True)


class TestNakedQuads:
    """Tests for naked_quads."""

    def test_quad_in_column(self, assert_logical_solution):
        board = (
            "{15}{1245}{2457}{45}3{19}{79}86"
            "{1568}{1568}{35678}{56}2{19}{79}4{13}"
            "{16}9{346}{46}7852{13}"
            "371856294"
            "9{68}{68}142375"
            "4{25}{25}397618"
            "2{146}{46}7{16}3859"
            "{18}392{18}5467"
            "7{568}{568}9{68}4132"
        )
        expected = [
            RemoveCandidates(0, 1, {1, 5}),
            RemoveCandidates(0, 2, {5}),
            RemoveCandidates(1, 2, {5, 6, 8}),
            RemoveCandidates(2, 2, {6}),
        ]
        assert_logical_solution(expected, board, naked_quads, subset=True)


class TestHiddenPairs:
    """Tests for hidden_pairs."""

    def test_1(self, assert_logical_solution):
        board = (
            "{1258}{1238}{23}{129}{12359}{59}{4589}{2345679}{345679}"
            "9{1238}46{1235}7{58}{235}{35}"
            "{25}768{2359}41{2359}{359}"
            "3{246}97{2456}1{45}8{456}"
            "7{246}8{29}{24569}{569}3{4569}1"
            "{46}513{469}87{469}2"
            "{48}{3489}75{89}261{349}"
            "{16}{169}54{1679}32{79}8"
            "{12468}{1234689}{23}{19}{16789}{69}{459}{34579}{34579}"
        )
        expected = [
            RemoveCandidates(0, 7, {2, 3, 4, 5, 9}),
            RemoveCandidates(0, 8, {3, 4, 5, 9}),
        ]
        assert_logical_solution(expected, board, hidden_pairs)

    def test_2(self, assert_logical_solution):
        board = (
            "72{56}4{19}8{1569}3{169}"
            "{569}8{356}{135}{129}{25}{1569}47"
            "4{359}1{35}768{59}2"
            "81{2456}739{56}{256}{46}"
            "{69}{379}{23467}851{3679}{269}{469}"
            "{59}{3579}{357}264{13579}8{19}"
            "2{57}968{57}413"
            "34{57}{15}{12}{257}{69}{69}8"
            "168943275"
        )
        expected = [
            RemoveCandidates(3, 2, {5, 6}),
            RemoveCandidates(4, 2, {3, 6, 7}),
            RemoveCandidates(4, 6, {6, 9}),
            RemoveCandidates(5, 6, {1, 5, 9}),
        ]
        assert_logical_solution(expected, board, hidden_pairs)


class TestHiddenTriples:
    """Tests for hidden_triples."""

    def test_triple_in_row(self, assert_logical_solution):
        board = (
            "{4789}{489}{47}{245678}{478}1{2469}3{245789}"
            "231{45678}9{578}{46}{56}{4578}"
            "{4789}65{2478}{478}31{289}{24789}"
            "6789243{15}{15}"
            "1{249}3{78}5{78}{249}{29}6"
            "{459}{2459}{24}1367{289}{2489}"
            "{48}{1248}936{28}57{12}"
            "{57}{25}6{257}19843"
            "3{12458}{247}{24578}{478}{2578}{269}{16}{129}"
        )
        expected = [
            RemoveCandidates(0, 3, {4, 7, 8}),
            RemoveCandidates(0, 6, {4, 9}),
            RemoveCandidates(0, 8, {4, 7, 8, 9}),
        ]
        assert_logical_solution(expected, board, hidden_triples, subset=True)


class TestHiddenQuads:
    """Tests for hidden_quads."""

    def test_1(self, assert_logical_solution):
        board = (
            "65{139}{13}87{19}24"
            "{278}{28}{1378}649{18}5{37}"
            "{89}4{378}{13}25{168}{37}{69}"
            "57{29}438{29}61"
            "{2489}{2689}{468}5{67}1{347}{347}{29}"
            "31{46}9{67}2{47}85"
            "{247}{26}{457}89{46}{357}1{237}"
            "{4789}{689}{578}213{4576}{47}{67}"
            "13{246}75{46}{26}98"
        )
        expected = [RemoveCandidates(7, 6, {6})]
        assert_logical_solution(expected, board, hidden_quads, subset=True)

    def test_2(self, assert_logical_solution):
        board = (
            "9{37}15{28}{28}{37}46"
            "425{367}9{367}{37}81"
            "86{37}{347}1{347}{59}2{59}"
            "5{3478}2{1346789}{378}{346789}{19}{37}{89}"
            "{37}19{2378}{23578}{23578}46{58}"
            "6{3478}{3478}{134789}{3578}{345789}{159}{37}2"
            "196{78}4{78}253"
            "2{345}{34}{39}6{359}817"
            "{37}{3578}{378}{23}{235}1694"
        )
        expected = [
            RemoveCandidates(3, 3, {3, 7, 8}),
            RemoveCandidates(3, 5, {3, 7, 8}),
            RemoveCandidates(5, 3, {3, 7, 8}),
            RemoveCandidates(5, 5, {3, 5, 7, 8}),
        ]
        assert_logical_solution(expected, board, hidden_quads, subset=True)


class TestPointingPairsPointingTriples:
    """Tests for pointing_pairs_pointing_triples."""

    def test_1(self, assert_logical_solution):
        board = (
            "{2458}179{245}36{48}{248}"
            "{23456}{2345}{36}{1257}8{57}{139}{149}{12349}"
            "9{2348}{368}{12}{246}{46}5{148}7"
            "{58}72{58}1{69}43{69}"
            "{1358}{3589}{389}4{569}2{189}7{1689}"
            "{18}6437{89}25{189}"
            "7{23489}1{28}{249}{489}{389}65"
            "{2468}{2489}{689}{57}3{57}{189}{1489}{1489}"
            "{348}{3489}56{49}172{3489}"
        )
        expected = [
            RemoveCandidates(1, 0, {3}),
            RemoveCandidates(1, 1, {3}),
            RemoveCandidates(1, 2, {3}),
            RemoveCandidates(2, 2, {6}),
            RemoveCandidates(4, 4, {9}),
            RemoveCandidates(4, 6, {9}),
            RemoveCandidates(4, 8, {9}),
            RemoveCandidates(6, 1, {2, 8}),
            RemoveCandidates(6, 6, {8}),
        ]
        assert_logical_solution(expected, board, pointing_pairs_pointing_triples)

    def test_2(self, assert_logical_solution):
        board = (
            "{789}32{478}{4578}61{4589}{78}"
            "41{5689}{2378}{3578}{2357}{23679}{23589}{23678}"
            "{678}{78}{568}9{34578}1{23467}{23458}{23678}"
            "5{278}{18}{16}9{37}{236}{238}4"
            "{289}6{489}{348}{3458}{345}{239}71"
            "3{4789}{1489}{16}2{47}{69}{89}5"
            "{1269}{249}{13469}5{13467}8{2347}{234}{237}"
            "{268}{248}{3468}{2347}{3467}{2347}519"
            "{12}57{234}{134}986{23}"
        )
        expected = [
            RemoveCandidates(0, 7, {8}),
            RemoveCandidates(1, 5, {7}),
            RemoveCandidates(1, 6, {2, 6}),
            RemoveCandidates(1, 7, {2, 8}),
            RemoveCandidates(1, 8, {2}),
            RemoveCandidates(2, 1, {7}),
            RemoveCandidates(2, 6, {6}),
            RemoveCandidates(2, 7, {8}),
            RemoveCandidates(4, 0, {8}),
            RemoveCandidates(4, 2, {8}),
            RemoveCandidates(6, 1, {4}),
            RemoveCandidates(6, 2, {1, 4}),
            RemoveCandidates(6, 4, {4, 7}),
            RemoveCandidates(7, 5, {7}),
        ]
        assert_logical_solution(expected, board, pointing_pairs_pointing_triples)

    def test_3(self, assert_logical_solution):
        board = (
            "93{147}{47}5{18}{24678}{1246}{1267}"
            "2{147}{147}63{18}{478}95"
            "856{479}{479}2{347}{134}{137}"
            "{46}{29}318{469}57{26}"
            "{1467}{1467}5{347}2{3467}98{136}"
            "{1467}8{29}{3479}{479}5{2346}{12346}{1236}"
            "{3467}{2467}{247}8{47}{347}159"
            "5{679}821{379}{367}{36}4"
            "{1347}{12479}{12479}56{3479}{237}{23}8"
        )
        expected = [
            RemoveCandidates(0, 6, {7}),
            RemoveCandidates(1, 6, {7}),
            RemoveCandidates(2, 6, {7}),
            RemoveCandidates(3, 5, {9}),
            RemoveCandidates(4, 5, {3}),
            RemoveCandidates(5, 0, {4}),
            RemoveCandidates(5, 3, {4}),
            RemoveCandidates(5, 4, {4}),
            RemoveCandidates(7, 1, {6}),
            RemoveCandidates(8, 1, {2}),
            RemoveCandidates(8, 2, {2}),
        ]
        assert_logical_solution(expected, board, pointing_pairs_pointing_triples)


class TestBoxLineReduction:
    """Tests for box_line_reduction."""

    def test_1(self, assert_logical_solution):
        board = (
            "{45}16{245}{2459}78{49}3"
            "{345}928{3456}{3456}{147}{47}{1457}"
            "87{35}{345}{3459}126{459}"
            "{127}48{1257}{12567}{56}3{79}{179}"
            "65{17}{1347}{1347}9{147}82"
            "{127}39{1247}{12478}{48}65{147}"
            "{1357}6{1357}9{1578}{58}{47}2{478}"
            "{157}8{157}{1457}{1457}2936"
            "9246{378}{38}51{78}"
        )
        expected = [
            RemoveCandidates(1, 6, {4}),
            RemoveCandidates(1, 8, {4}),
            RemoveCandidates(2, 8, {4}),
        ]
        assert_logical_solution(expected, board, box_line_reduction)

    def test_2(self, assert_logical_solution):
        board = (
            "{68}2{68}943715"
            "9{13}4{1578}{127}{157}6{23}{28}"
            "75{13}{168}{126}{16}{389}4{289}"
            "5{1367}{13679}48{1679}{19}{279}{2679}"
            "2{1678}{16789}{167}{1679}{1679}453"
            "4{167}{1679}352{189}{79}{6789}"
            "{36}42{567}{3679}{5679}{39}81"
            "{138}{1378}5{17}{1379}426{79}"
            "{136}9{1367}2{1367}85{37}4"
        )
        expected = [
            RemoveCandidates(3, 2, {6}),
            RemoveCandidates(3, 6, {9}),
            RemoveCandidates(3, 8, {9}),
            RemoveCandidates(4, 2, {6}),
            RemoveCandidates(5, 2, {6}),
            RemoveCandidates(5, 6, {9}),
            RemoveCandidates(5, 8, {9}),
            RemoveCandidates(7, 1, {1, 3}),
            RemoveCandidates(7, 3, {7}),
            RemoveCandidates(7, 4, {7}),
            RemoveCandidates(8, 2, {1, 3}),
            RemoveCandidates(8, 4, {7}),
        ]
        assert_logical_solution(expected, board, box_line_reduction)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
