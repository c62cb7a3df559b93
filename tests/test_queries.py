import pytest

from app.api.friends.edges import AcceptedEdge, PendingEdge, RelationshipStatus, classify
from app.api.friends.mutual import MutualFriendCalculator
from app.api.friends.queries import RelationshipQueryEngine
from app.api.friends.schemas import FriendshipStatus
from app.api.friends.store import FriendshipStore
from app.api.users.service import UserService


def engine_for(db):
    return RelationshipQueryEngine(FriendshipStore(db))


class TestClassify:
    def test_no_edge_is_none(self):
        assert classify(None, 1) == RelationshipStatus.NONE

    def test_pending_from_both_sides(self):
        edge = PendingEdge(requester=1, recipient=2)
        assert classify(edge, 1) == RelationshipStatus.PENDING_OUTGOING
        assert classify(edge, 2) == RelationshipStatus.PENDING_INCOMING

    def test_accepted_ignores_direction(self):
        edge = AcceptedEdge(user_a=1, user_b=2)
        assert classify(edge, 1) == RelationshipStatus.ACCEPTED
        assert classify(edge, 2) == RelationshipStatus.ACCEPTED

    def test_edge_not_involving_viewer_is_none(self):
        assert classify(AcceptedEdge(user_a=1, user_b=2), 3) == RelationshipStatus.NONE

    def test_row_converts_to_variant(self, make_user, befriend):
        alice, bob = make_user("Alice"), make_user("Bob")
        pending = befriend(alice, bob, status="pending").as_edge()

        assert isinstance(pending, PendingEdge)
        assert pending.requester == alice.id
        assert pending.recipient == bob.id
        assert pending.other(bob.id) == alice.id


class TestFriendsOf:
    def test_accept_makes_friendship_visible_both_ways(self, db, make_user):
        alice, bob = make_user("Alice"), make_user("Bob")
        store = FriendshipStore(db)
        store.update_status(store.create_edge(alice.id, bob.id), FriendshipStatus.ACCEPTED)

        queries = engine_for(db)
        assert bob.id in queries.friends_of(alice.id)
        assert alice.id in queries.friends_of(bob.id)

    def test_pending_edges_are_not_friends(self, db, make_user, befriend):
        alice, bob = make_user("Alice"), make_user("Bob")
        befriend(alice, bob, status="pending")

        assert engine_for(db).friends_of(alice.id) == set()

    def test_never_contains_self(self, db, make_user, befriend):
        alice, bob, carol = make_user("Alice"), make_user("Bob"), make_user("Carol")
        befriend(alice, bob)
        befriend(carol, alice)

        queries = engine_for(db)
        for user in (alice, bob, carol):
            assert user.id not in queries.friends_of(user.id)
        assert queries.friends_of(alice.id) == {bob.id, carol.id}

    def test_delete_removes_from_both_sets(self, db, make_user, befriend):
        alice, bob = make_user("Alice"), make_user("Bob")
        friendship = befriend(alice, bob)
        FriendshipStore(db).delete_edge(friendship)

        queries = engine_for(db)
        assert bob.id not in queries.friends_of(alice.id)
        assert alice.id not in queries.friends_of(bob.id)
        assert queries.status_between(alice.id, bob.id) == RelationshipStatus.NONE

    def test_invalidate_drops_cached_set(self, db, make_user, befriend):
        alice, bob = make_user("Alice"), make_user("Bob")
        queries = engine_for(db)
        assert queries.friends_of(alice.id) == set()

        befriend(alice, bob)
        assert queries.friends_of(alice.id) == set()
        queries.invalidate(alice.id)
        assert queries.friends_of(alice.id) == {bob.id}


class TestPendingIncoming:
    def test_only_requests_addressed_to_user(self, db, make_user, befriend):
        alice, bob, carol = make_user("Alice"), make_user("Bob"), make_user("Carol")
        befriend(bob, alice, status="pending")
        befriend(alice, carol, status="pending")

        incoming = engine_for(db).pending_incoming(alice.id)

        assert [edge.requester for edge in incoming] == [bob.id]
        assert all(edge.recipient == alice.id for edge in incoming)

    def test_outgoing_lists_sent_requests(self, db, make_user, befriend):
        alice, bob, carol = make_user("Alice"), make_user("Bob"), make_user("Carol")
        befriend(alice, bob, status="pending")
        befriend(alice, carol, status="pending")
        befriend(carol, bob)

        outgoing = engine_for(db).pending_outgoing(alice.id)

        assert sorted(edge.recipient for edge in outgoing) == [bob.id, carol.id]


class TestStatusBetween:
    def test_all_states(self, db, make_user, befriend):
        alice, bob, carol, dave = (make_user(name) for name in ("Alice", "Bob", "Carol", "Dave"))
        befriend(alice, bob, status="pending")
        befriend(carol, alice)

        queries = engine_for(db)
        assert queries.status_between(alice.id, bob.id) == RelationshipStatus.PENDING_OUTGOING
        assert queries.status_between(bob.id, alice.id) == RelationshipStatus.PENDING_INCOMING
        assert queries.status_between(alice.id, carol.id) == RelationshipStatus.ACCEPTED
        assert queries.status_between(carol.id, alice.id) == RelationshipStatus.ACCEPTED
        assert queries.status_between(alice.id, dave.id) == RelationshipStatus.NONE
        assert queries.status_between(alice.id, alice.id) == RelationshipStatus.NONE


class TestMutualFriends:
    @pytest.fixture
    def graph(self, make_user, befriend):
        """alice and erin share bob, carol and dave; frank is only alice's friend."""
        users = {name: make_user(name) for name in ("Alice", "Bob", "Carol", "Dave", "Erin", "Frank")}
        for name in ("Bob", "Carol", "Dave", "Frank"):
            befriend(users["Alice"], users[name])
        for name in ("Dave", "Carol", "Bob"):
            befriend(users[name], users["Erin"])
        return users

    def calculator(self, db):
        return MutualFriendCalculator(engine_for(db), UserService(db))

    def test_count_is_symmetric(self, db, graph):
        mutual = self.calculator(db)
        alice, erin = graph["Alice"], graph["Erin"]

        assert mutual.mutual_count(alice.id, erin.id) == 3
        assert mutual.mutual_count(erin.id, alice.id) == 3
        assert mutual.mutual_count(graph["Bob"].id, graph["Frank"].id) == mutual.mutual_count(
            graph["Frank"].id, graph["Bob"].id
        )

    def test_list_is_sorted_by_user_id(self, db, graph):
        mutual = self.calculator(db)

        friends = mutual.mutual_list(graph["Erin"].id, graph["Alice"].id)

        assert [friend.id for friend in friends] == sorted(
            graph[name].id for name in ("Bob", "Carol", "Dave")
        )
        assert friends[0].first_name == "Bob"

    def test_list_limit(self, db, graph):
        mutual = self.calculator(db)

        friends = mutual.mutual_list(graph["Alice"].id, graph["Erin"].id, limit=2)

        assert [friend.first_name for friend in friends] == ["Bob", "Carol"]

    def test_no_overlap(self, db, graph):
        mutual = self.calculator(db)
        assert mutual.mutual_count(graph["Frank"].id, graph["Erin"].id) == 0
        assert mutual.mutual_list(graph["Frank"].id, graph["Erin"].id) == []
